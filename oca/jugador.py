"""Players of the Game of the Goose and their penalty state."""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from .casillas import Casilla

logger = logging.getLogger(__name__)

CASILLA_META = 62
META = CASILLA_META + 1
FUERA_DEL_TABLERO = -1


class EstadoJugador(enum.Enum):
    """Whether a player is currently under a penalty."""

    NO_CASTIGADO = "noCastigado"  # Oca, Puente, Normal
    CASTIGADO = "castigado"  # Posada, Pozo, Cárcel


@dataclass(eq=False)
class Jugador:
    """A player: a name, a square and the turns it still has to sit out.

    A value of -1 in ``turnos_perdidos`` means the player is stuck in the
    well until someone else falls into it.
    """

    nombre: str
    posicion: int = 0
    turnos_perdidos: int = 0
    estado: EstadoJugador = EstadoJugador.NO_CASTIGADO

    def mover(self, cantidad: int) -> Optional[str]:
        """Advance by ``cantidad`` squares, bouncing back off the goal.

        Returns the bounce notice when the move overshoots the goal,
        otherwise ``None``.
        """
        if self.posicion == FUERA_DEL_TABLERO:
            self.posicion = cantidad
        else:
            self.posicion += cantidad

        if self.posicion > META:
            excedente = self.posicion - META
            rebote = META - excedente
            self.posicion = rebote
            logger.info("%s rebota hasta la casilla %d", self.nombre, rebote)
            return (
                "¡Te pasaste de la casilla 63!\n"
                f"Rebotás hacia atrás y caés en la casilla {rebote}."
            )
        return None

    def aplicar_efecto_casilla(self, casilla: Casilla) -> str:
        """Apply the effect of ``casilla`` to this player and return its message."""
        return casilla.activar_jugador(self)

    def reset_estado(self) -> None:
        """Clear any penalty."""
        self.estado = EstadoJugador.NO_CASTIGADO
        self.turnos_perdidos = 0

    @property
    def castigado(self) -> bool:
        """True while the player is under a penalty."""
        return self.estado is EstadoJugador.CASTIGADO