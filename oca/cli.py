"""Command-line front end: start menu, rules and a text game loop."""

from __future__ import annotations

import argparse
import random
import sys
from typing import Optional, Protocol, TextIO

from .dado import Dado
from .espiral import dibujar_tablero
from .juego import Evento, Juego

MIN_JUGADORES = 2
MAX_JUGADORES = 4
_SALIR = {"q", "salir"}

REGLAS = (
    "REGLAS DEL JUEGO DE LA OCA:\n\n"
    "1. Cada jugador lanza el dado en su turno.\n"
    "2. Si cae en una casilla especial, sigue las instrucciones indicadas:\n"
    "   - Oca: avanza automáticamente a la próxima oca.\n"
    "   - Puente: avanza a la casilla 12.\n"
    "   - Posada: pierde un turno.\n"
    "   - Pozo: no puede moverse hasta que otro jugador caiga en la misma casilla.\n"
    "   - Laberinto: retrocede hasta la casilla 30.\n"
    "   - Cárcel: pierde dos turnos.\n"
    "   - Calavera: vuelve a la casilla 1.\n"
    "   - Jardín de la Oca: gana el juego.\n"
    "3. Gana el primero que llegue exactamente a la casilla 63 (Jardín de la Oca).\n"
    "4. Si saca más puntos de los necesarios debe retroceder la diferencia."
)


class _Tirador(Protocol):
    def tirar(self) -> int: ...


def reglas() -> str:
    """Return the rules of the game."""
    return REGLAS


def jugar(
    num_jugadores: int = MIN_JUGADORES,
    entrada: Optional[TextIO] = None,
    salida: Optional[TextIO] = None,
    dado: Optional[_Tirador] = None,
) -> Optional[str]:
    """Play a game in text mode, one die roll per line read from ``entrada``.

    Returns the winner's name, or None when the input ends or the user quits.
    """
    if not MIN_JUGADORES <= num_jugadores <= MAX_JUGADORES:
        raise ValueError(
            f"La cantidad de jugadores debe estar entre {MIN_JUGADORES} y {MAX_JUGADORES}"
        )
    entrada = entrada if entrada is not None else sys.stdin
    salida = salida if salida is not None else sys.stdout

    def escribir(texto: str) -> None:
        print(texto, file=salida)

    def castigado(nombre: str, turnos: int) -> None:
        if turnos == -1:
            escribir(f"{nombre} sigue atrapado en el Pozo.")
        else:
            escribir(f"{nombre} está castigado. Turnos restantes: {turnos}")

    juego = Juego(dado)
    pendientes: list[str] = []
    ganadores: list[str] = []
    juego.suscribir(Evento.MENSAJE_ESTADO, escribir)
    juego.suscribir(Evento.DADO_LANZADO, lambda valor: escribir(f"Dado: {valor}"))
    juego.suscribir(Evento.REBOTE, escribir)
    juego.suscribir(Evento.JUGADOR_CASTIGADO, castigado)
    juego.suscribir(Evento.MENSAJE_PARA_MOSTRAR, pendientes.append)
    juego.suscribir(Evento.JUEGO_GANADO, ganadores.append)

    juego.iniciar(num_jugadores)
    while not juego.terminado:
        escribir(dibujar_tablero([j.posicion for j in juego.jugadores]))
        escribir("Pulsa Enter para tirar el dado (q para salir).")
        linea = entrada.readline()
        if not linea or linea.strip().lower() in _SALIR:
            return None
        juego.jugar_turno()
        while pendientes:
            escribir(pendientes.pop(0))
            juego.continuar_turno()

    ganador = ganadores[0]
    escribir(dibujar_tablero([j.posicion for j in juego.jugadores]))
    escribir(f"{ganador} ha ganado el juego 🎉")
    return ganador


def main(argv: Optional[list[str]] = None) -> int:
    """Entry point of the ``oca`` command."""
    parser = argparse.ArgumentParser(prog="oca", description="Juego de la Oca.")
    parser.add_argument(
        "-j",
        "--jugadores",
        type=int,
        choices=range(MIN_JUGADORES, MAX_JUGADORES + 1),
        default=MIN_JUGADORES,
        help="cantidad de jugadores (2 a 4)",
    )
    parser.add_argument("-r", "--reglas", action="store_true", help="muestra las reglas")
    parser.add_argument("--semilla", type=int, default=None, help="semilla del dado")
    args = parser.parse_args(argv)

    if args.reglas:
        print(reglas())
        return 0

    dado = Dado(random.Random(args.semilla)) if args.semilla is not None else None
    jugar(args.jugadores, sys.stdin, sys.stdout, dado)
    return 0