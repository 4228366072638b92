"""FastAPI server exposing legal move generation and board utilities."""

from __future__ import annotations

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field

from chesscore.attacks import is_in_check, is_square_attacked
from chesscore.board import Position
from chesscore.codec import coordinate_to_square, format_board, square_to_coordinate
from chesscore.constants import START_FEN
from chesscore.legal import legal_moves_for
from chesscore.symmetry import Symmetry, apply_symmetry, canonical_board

from .errors import install_error_handlers
from .logging_middleware import RequestIDLoggingMiddleware


class PositionRequest(BaseModel):
    fen: str = Field(default=START_FEN, description="Full FEN or bare placement field")
    strict_king: bool = Field(default=False, description="Simulate king moves before the attack test")


class AttackRequest(BaseModel):
    fen: str = Field(default=START_FEN)
    square: str = Field(min_length=2, max_length=2, description="Algebraic coordinate, e.g. e4")
    color: str = Field(default="w", pattern="^[wb]$", description="Side whose square is tested")


class SymmetryRequest(BaseModel):
    fen: str = Field(default=START_FEN)
    symmetry: int = Field(default=0, ge=0, le=len(Symmetry) - 1)


class CanonicalRequest(BaseModel):
    fen: str = Field(default=START_FEN)


app = FastAPI(title="Chess Move Generation API", version="0.1.0")

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.add_middleware(RequestIDLoggingMiddleware)
install_error_handlers(app)


def _move_uci(origin: int, destination: int) -> str:
    return square_to_coordinate(origin) + square_to_coordinate(destination)


@app.get("/")
def root() -> dict[str, str]:
    return {"status": "ok", "service": "chesscore"}


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


@app.post("/legal-moves")
def legal_moves(payload: PositionRequest) -> dict:
    position = Position.from_fen(payload.fen)
    moves = legal_moves_for(position, strict_king=payload.strict_king)
    return {
        "fen": position.to_fen(),
        "side_to_move": "w" if position.white_to_move else "b",
        "in_check": is_in_check(position.board, position.white_to_move),
        "count": len(moves),
        "moves": [_move_uci(origin, destination) for origin, destination in moves],
    }


@app.post("/attacked")
def attacked(payload: AttackRequest) -> dict:
    position = Position.from_fen(payload.fen)
    square = coordinate_to_square(payload.square)
    return {
        "square": payload.square,
        "color": payload.color,
        "attacked": is_square_attacked(position.board, payload.color == "w", square),
    }


@app.post("/symmetry")
def symmetry(payload: SymmetryRequest) -> dict:
    position = Position.from_fen(payload.fen)
    board = apply_symmetry(payload.symmetry, position.board)
    return {"symmetry": Symmetry(payload.symmetry).name.lower(), "placement": format_board(board)}


@app.post("/canonical")
def canonical(payload: CanonicalRequest) -> dict:
    position = Position.from_fen(payload.fen)
    return {"placement": format_board(canonical_board(position.board))}
