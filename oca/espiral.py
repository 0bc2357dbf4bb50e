"""Spiral layout of the board squares and a plain-text rendering of it."""

from __future__ import annotations

import enum
import logging
import string
from collections import defaultdict
from typing import Sequence

from .casillas import (
    CALAVERA,
    CARCEL,
    CASILLA_PUENTE,
    CASILLAS_OCA,
    LABERINTO,
    POSADA,
    POZO,
)
from .jugador import META as CASILLA_FINAL

logger = logging.getLogger(__name__)

LADO = 8
TOTAL = 63
_FICHAS = string.ascii_uppercase

# right, down, left, up
_DIRECCIONES = ((1, 0), (0, 1), (-1, 0), (0, -1))


class TipoCasilla(enum.Enum):
    """Kind of square as shown on the board; the value is its symbol."""

    NORMAL = " "
    OCA = "o"
    PUENTE = "p"
    POSADA = "h"
    POZO = "w"
    LABERINTO = "l"
    CARCEL = "c"
    CALAVERA = "x"
    META = "m"


_ESPECIALES = {
    CASILLA_PUENTE: TipoCasilla.PUENTE,
    POSADA: TipoCasilla.POSADA,
    POZO: TipoCasilla.POZO,
    LABERINTO: TipoCasilla.LABERINTO,
    CARCEL: TipoCasilla.CARCEL,
    CALAVERA: TipoCasilla.CALAVERA,
    CASILLA_FINAL: TipoCasilla.META,
}


def tipo_casilla(numero: int) -> TipoCasilla:
    """Return the kind of the square numbered ``numero``."""
    if numero in CASILLAS_OCA:
        return TipoCasilla.OCA
    return _ESPECIALES.get(numero, TipoCasilla.NORMAL)


def coordenadas_espiral(lado: int = LADO, total: int = TOTAL) -> dict[int, tuple[int, int]]:
    """Map squares 1..``total`` to (x, y) cells of a ``lado`` x ``lado`` grid.

    The path starts at the top-left corner, runs right and turns clockwise
    whenever it would leave the grid or enter a cell already used.
    """
    if lado < 1:
        raise ValueError(f"Lado inválido: {lado}")
    if not 0 <= total <= lado * lado:
        raise ValueError(f"No caben {total} casillas en un tablero de {lado}x{lado}")

    coordenadas: dict[int, tuple[int, int]] = {}
    ocupado: set[tuple[int, int]] = set()
    x = y = 0
    direccion = 0
    for numero in range(1, total + 1):
        coordenadas[numero] = (x, y)
        ocupado.add((x, y))

        dx, dy = _DIRECCIONES[direccion]
        nx, ny = x + dx, y + dy
        if not (0 <= nx < lado and 0 <= ny < lado) or (nx, ny) in ocupado:
            direccion = (direccion + 1) % len(_DIRECCIONES)
            dx, dy = _DIRECCIONES[direccion]
            nx, ny = x + dx, y + dy
        x, y = nx, ny
    return coordenadas


def dibujar_tablero(
    posiciones: Sequence[int], lado: int = LADO, total: int = TOTAL
) -> str:
    """Render the spiral board as text, marking each player's square.

    ``posiciones`` holds one square per player in turn order; players are
    drawn as A, B, C, ... Players off the board are not drawn.
    """
    if len(posiciones) > len(_FICHAS):
        raise ValueError(f"Demasiados jugadores para dibujar: {len(posiciones)}")

    coordenadas = coordenadas_espiral(lado, total)

    ocupantes: defaultdict[int, str] = defaultdict(str)
    for indice, posicion in enumerate(posiciones):
        if not 1 <= posicion <= total:
            logger.debug("Jugador %d fuera del tablero: %d", indice, posicion)
            continue
        ocupantes[posicion] += _FICHAS[indice]

    ancho_numero = len(str(total))
    ancho = ancho_numero + 1 + len(posiciones)
    vacia = " " * (ancho + 2)
    filas = [[vacia] * lado for _ in range(lado)]
    for numero, (x, y) in coordenadas.items():
        texto = f"{numero:>{ancho_numero}}{tipo_casilla(numero).value}{ocupantes[numero]}"
        filas[y][x] = f"[{texto:<{ancho}}]"
    return "\n".join("".join(fila).rstrip() for fila in filas)