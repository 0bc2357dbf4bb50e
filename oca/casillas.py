"""Board squares and the effects they have on a player who lands on them."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Optional

from .jugador import EstadoJugador, Jugador

logger = logging.getLogger(__name__)

CASILLAS_OCA = (9, 18, 27, 36, 45, 54)
CASILLA_PUENTE = 6
DESTINO_PUENTE = 12
POSADA = 19
POZO = 31
LABERINTO = 42
CARCEL = 56
CALAVERA = 58
CASILLAS_CASTIGO = (POSADA, POZO, LABERINTO, CARCEL, CALAVERA)
DESTINO_LABERINTO = 30
DESTINO_CALAVERA = 1
REPETIR_TURNO = "Repetís el turno!"


class Casilla(ABC):
    """A square of the board, identified by its number."""

    def __init__(self, numero: int) -> None:
        self.numero = numero

    @abstractmethod
    def activar_jugador(self, jugador: Optional[Jugador]) -> str:
        """Apply this square's effect and return a message, empty if none."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.numero})"


class CasillaNormal(Casilla):
    """A square with no special effect."""

    def activar_jugador(self, jugador: Optional[Jugador]) -> str:
        return ""


class CasillaOca(Casilla):
    """A goose square: jump to the next goose and roll again."""

    def activar_jugador(self, jugador: Optional[Jugador]) -> str:
        if jugador is None:
            return ""
        pos = self.numero
        for actual, siguiente in zip(CASILLAS_OCA, CASILLAS_OCA[1:]):
            if pos == actual:
                jugador.posicion = siguiente
                jugador.estado = EstadoJugador.NO_CASTIGADO
                logger.info(
                    "El jugador %s avanza de Oca a Oca a la casilla %d",
                    jugador.nombre,
                    actual + 1,
                )
                return (
                    f"¡Has caído en la casilla {pos} de Oca! Avanza hasta la próxima "
                    f"Oca en la casilla {siguiente}.{REPETIR_TURNO}"
                )
        return (
            "Has caído en la última casill Oca. No hay próxima Oca para avanzar."
            + REPETIR_TURNO
        )


class CasillaPuente(Casilla):
    """The bridge: carries the player forward to square 12."""

    def activar_jugador(self, jugador: Optional[Jugador]) -> str:
        if jugador is None:
            return ""
        jugador.posicion = DESTINO_PUENTE
        jugador.estado = EstadoJugador.NO_CASTIGADO
        logger.info("El jugador %s cruza el puente y avanza a la casilla 12.", jugador.nombre)
        return "¡Has caído en el Puente (casilla 6)! Avanza hasta la casilla 12."


class CasillaCastigo(Casilla):
    """A penalty square: inn, well, labyrinth, jail or skull."""

    def __init__(self, numero: int) -> None:
        super().__init__(numero)
        self._atrapado_en_pozo: Optional[Jugador] = None

    def activar_jugador(self, jugador: Optional[Jugador]) -> str:
        if jugador is None:
            return ""
        jugador.estado = EstadoJugador.CASTIGADO
        if self.numero == POSADA:
            jugador.turnos_perdidos = 1
            logger.info("El jugador %s cae en la Posada y pierde un turno.", jugador.nombre)
            return "¡Has caído en la Posada (casilla 19)! Pierdes un turno."
        if self.numero == CARCEL:
            jugador.turnos_perdidos = 1
            logger.info("El jugador %s cae en la Cárcel y pierde dos turnos.", jugador.nombre)
            return "¡Has caído en la Carcel (casilla 56)! Pierdes dos turnos."
        if self.numero == POZO:
            return self._caer_en_pozo(jugador)
        if self.numero == LABERINTO:
            jugador.posicion = DESTINO_LABERINTO
            logger.info(
                "El jugador %s cae en el Laberinto (casilla 42) y retrocede hasta la casilla 30.",
                jugador.nombre,
            )
            return "¡Has caído en el Laberinto (casilla 42)! Retrocedes a la casilla 30."
        if self.numero == CALAVERA:
            jugador.posicion = DESTINO_CALAVERA
            logger.info(
                "El jugador %s cae en la Calavera (casilla 58) y vuelve a la casilla 1.",
                jugador.nombre,
            )
            return "¡Has caído en la Calavera (casilla 58)! Retrocedes a la casilla 1."
        return ""

    def _atrapar(self, jugador: Jugador) -> None:
        self._atrapado_en_pozo = jugador
        jugador.estado = EstadoJugador.CASTIGADO
        jugador.turnos_perdidos = -1
        logger.info(
            "El jugador %s cae en el Pozo (casilla 31) y queda atrapado hasta que otro "
            "jugador caiga allí.",
            jugador.nombre,
        )

    def _caer_en_pozo(self, jugador: Jugador) -> str:
        anterior = self._atrapado_en_pozo
        if anterior is None:
            self._atrapar(jugador)
            return (
                "¡Has caído en el Pozo (casilla 31)! Quedas atrapado hasta que otro "
                "jugador caiga en esta casilla."
            )
        if anterior is not jugador:
            anterior.estado = EstadoJugador.NO_CASTIGADO
            anterior.turnos_perdidos = 0
            logger.info(
                "El jugador %s es liberado del Pozo por %s", anterior.nombre, jugador.nombre
            )
            self._atrapar(jugador)
            return (
                "¡Has caído en el Pozo (casilla 31)! Quedas atrapado, pero liberaste "
                "al jugador anterior."
            )
        logger.info("El jugador %s ya está atrapado en el Pozo.", jugador.nombre)
        return "Ya estás atrapado en el Pozo (casilla 31)."