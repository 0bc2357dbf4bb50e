"""The game loop: turns, penalties, winners and the events they raise."""

from __future__ import annotations

import enum
import logging
from collections import defaultdict
from typing import Callable, Optional, Protocol

from .casillas import REPETIR_TURNO
from .dado import Dado
from .jugador import CASILLA_META, FUERA_DEL_TABLERO, Jugador
from .tablero import Tablero

logger = logging.getLogger(__name__)

TOTAL_CASILLAS = 63


class _Tirador(Protocol):
    def tirar(self) -> int: ...


class Evento(enum.Enum):
    """What a game announces to its subscribers, with the arguments passed."""

    JUEGO_INICIADO = "juego_iniciado"  # (num_jugadores)
    DADO_LANZADO = "dado_lanzado"  # (valor)
    TURNO_CAMBIADO = "turno_cambiado"  # (nombre del siguiente jugador)
    JUGADOR_CASTIGADO = "jugador_castigado"  # (nombre, turnos restantes)
    JUEGO_GANADO = "juego_ganado"  # (nombre del ganador)
    MENSAJE_ESTADO = "mensaje_estado"  # (mensaje)
    TURNO_REPETIDO = "turno_repetido"  # ()
    JUGADOR_MOVIDO = "jugador_movido"  # (índice, casilla origen, casilla destino)
    MENSAJE_PARA_MOSTRAR = "mensaje_para_mostrar"  # (mensaje)
    REBOTE = "rebote"  # (mensaje)


class Juego:
    """Coordinates players, board and die through a game of the Goose."""

    def __init__(self, dado: Optional[_Tirador] = None) -> None:
        self._dado: _Tirador = dado if dado is not None else Dado()
        self._jugadores: list[Jugador] = []
        self._tablero: Optional[Tablero] = None
        self._turno = 0
        self._terminado = False
        self._mensaje_especial = ""
        self._suscriptores: defaultdict[Evento, list[Callable[..., None]]] = defaultdict(list)

    def suscribir(self, evento: Evento, callback: Callable[..., None]) -> None:
        """Call ``callback`` every time ``evento`` is raised."""
        self._suscriptores[evento].append(callback)

    def _emitir(self, evento: Evento, *args: object) -> None:
        for callback in list(self._suscriptores[evento]):
            callback(*args)

    def iniciar(self, num_jugadores: int) -> None:
        """Create the players, off the board, and the board itself."""
        if num_jugadores < 1:
            raise ValueError(f"Cantidad de jugadores inválida: {num_jugadores}")
        self._jugadores = [
            Jugador(f"Jugador {i + 1}", posicion=FUERA_DEL_TABLERO)
            for i in range(num_jugadores)
        ]
        self._tablero = Tablero(TOTAL_CASILLAS)
        self._tablero.inicializar()
        self._turno = 0
        self._terminado = False
        self._mensaje_especial = ""
        logger.info("El juego ha comenzado con %d jugadores", num_jugadores)
        self._emitir(Evento.JUEGO_INICIADO, num_jugadores)

    def _requerir_iniciado(self) -> Tablero:
        if self._tablero is None:
            raise RuntimeError("El juego no ha sido iniciado")
        return self._tablero

    def jugar_turno(self) -> None:
        """Play the current player's turn, skipping players who sit out."""
        if self._terminado:
            return
        tablero = self._requerir_iniciado()

        while True:
            jugador = self._jugadores[self._turno]
            self._emitir(
                Evento.MENSAJE_ESTADO,
                f"Turno de {jugador.nombre} (Posición: {jugador.posicion + 1})",
            )
            if not jugador.castigado:
                break
            self._emitir(Evento.JUGADOR_CASTIGADO, jugador.nombre, jugador.turnos_perdidos)
            if jugador.turnos_perdidos > 0:
                logger.info(
                    "%s está castigado y pierde el turno. Turnos restantes: %d",
                    jugador.nombre,
                    jugador.turnos_perdidos,
                )
                jugador.turnos_perdidos -= 1
                self._avanzar_turno()
                continue
            if jugador.turnos_perdidos == -1:
                logger.info("%s sigue atrapado en el Pozo y no puede jugar", jugador.nombre)
                self._avanzar_turno()
                continue
            jugador.reset_estado()
            logger.info("%s ha terminado su castigo y puede jugar.", jugador.nombre)
            break

        posicion_original = jugador.posicion
        if not FUERA_DEL_TABLERO <= posicion_original <= len(tablero):
            logger.error("Posición fuera de rango: %d", posicion_original)
            raise RuntimeError(f"Posición fuera de rango: {posicion_original}")

        tirada = self._dado.tirar()
        self._emitir(Evento.DADO_LANZADO, tirada)
        logger.debug("%s tira el dado: %d", jugador.nombre, tirada)

        rebote = jugador.mover(tirada)
        if rebote is not None:
            self._emitir(Evento.REBOTE, rebote)
        self._emitir(Evento.JUGADOR_MOVIDO, self._turno, posicion_original, jugador.posicion)

        casilla = tablero.casilla(jugador.posicion)

        if self._declarar_ganador(jugador):
            return

        self._mensaje_especial = casilla.activar_jugador(jugador)
        if self._mensaje_especial:
            self._emitir(Evento.MENSAJE_PARA_MOSTRAR, self._mensaje_especial)
            return

        self._emitir(Evento.JUGADOR_MOVIDO, self._turno, posicion_original, jugador.posicion)
        self._avanzar_turno()

    def continuar_turno(self) -> None:
        """Finish a turn after a special square's message has been shown."""
        self._requerir_iniciado()
        jugador = self._jugadores[self._turno]
        self._emitir(Evento.JUGADOR_MOVIDO, self._turno, jugador.posicion, jugador.posicion)

        if self._declarar_ganador(jugador):
            return

        if REPETIR_TURNO in self._mensaje_especial:
            self._mensaje_especial = ""
            self._emitir(Evento.TURNO_REPETIDO)
            return

        self._avanzar_turno()

    def _declarar_ganador(self, jugador: Jugador) -> bool:
        indice = self.verificar_ganador()
        if indice is None:
            return False
        self._terminado = True
        self._emitir(Evento.JUEGO_GANADO, self._jugadores[indice].nombre)
        logger.info("%s ha ganado el juego.", jugador.nombre)
        return True

    def verificar_ganador(self) -> Optional[int]:
        """Return the index of the player on the goal square, or None."""
        for indice, jugador in enumerate(self._jugadores):
            if jugador.posicion == CASILLA_META + 1:
                return indice
        return None

    def _avanzar_turno(self) -> None:
        self._turno = (self._turno + 1) % len(self._jugadores)
        self._emitir(Evento.TURNO_CAMBIADO, self._jugadores[self._turno].nombre)

    @property
    def terminado(self) -> bool:
        """True once someone has won."""
        return self._terminado

    @property
    def turno(self) -> int:
        """Index of the player whose turn it is."""
        return self._turno

    @property
    def jugadores(self) -> list[Jugador]:
        """The players, in turn order."""
        return list(self._jugadores)