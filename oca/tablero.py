"""The board: the squares of the game laid out by number."""

from __future__ import annotations

import logging

from .casillas import (
    CASILLA_PUENTE,
    CASILLAS_CASTIGO,
    CASILLAS_OCA,
    Casilla,
    CasillaCastigo,
    CasillaNormal,
    CasillaOca,
    CasillaPuente,
)

logger = logging.getLogger(__name__)


class Tablero:
    """Holds the board's squares; positions run from 0 to the goal inclusive."""

    def __init__(self, total_casillas: int = 63) -> None:
        self._cantidad = total_casillas
        self._casillas: list[Casilla] = []

    def inicializar(self) -> None:
        """Create every square with the type its number calls for."""
        casillas: list[Casilla] = []
        for i in range(self._cantidad + 1):
            if i in CASILLAS_OCA:
                casillas.append(CasillaOca(i))
            elif i == CASILLA_PUENTE:
                casillas.append(CasillaPuente(i))
            elif i in CASILLAS_CASTIGO:
                casillas.append(CasillaCastigo(i))
            else:
                casillas.append(CasillaNormal(i))
        self._casillas = casillas

    def casilla(self, pos: int) -> Casilla:
        """Return the square at ``pos``; raise IndexError when out of range."""
        if not 0 <= pos < len(self._casillas):
            logger.error("Posición de casilla fuera de rango: %d", pos)
            raise IndexError(f"Posición de casilla fuera de rango: {pos}")
        return self._casillas[pos]

    def __len__(self) -> int:
        return self._cantidad