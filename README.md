# oca

The Game of the Goose (*Juego de la Oca*) for two to four players, played in
the terminal. The board is the classic 63-square spiral, and the game's
messages are in Spanish.

## Installation

```
pip install .
```

## Playing

```
oca                  # two players
oca -j 4             # two to four players (--jugadores)
oca --semilla 42     # fixed die seed, for a repeatable game
oca --reglas         # print the rules and exit (-r)
```

Players are named automatically ("Jugador 1", "Jugador 2", and so on) and
start off the board. Before every turn the board is drawn as an 8x8 spiral,
each square showing its number, a symbol for its kind and the tokens of the
players on it (A for the first player, B for the second, ...). Press Enter to
roll the die; type `q` or `salir`, or end the input, to stop. The game ends
when a player lands exactly on square 63.

## Rules as played

- Every player rolls one die on their turn.
- **Oca** (9, 18, 27, 36, 45, 54): jump to the next goose and roll again.
  Landing on 54, the last goose, also gives another roll.
- **Puente** (6): move on to square 12.
- **Posada** (19): miss a turn.
- **Pozo** (31): stay trapped until another player lands there, which frees
  the first player and traps the newcomer.
- **Laberinto** (42): go back to square 30.
- **Cárcel** (56): miss a turn (the on-screen message speaks of two).
- **Calavera** (58): go back to square 1.
- **Jardín de la Oca** (63): the first player to land on it exactly wins.
  A roll that would go past 63 bounces back by the extra amount.

The square a player is sent to by an Oca, Puente, Laberinto or Calavera is
not itself applied. `oca.cli.reglas()` returns the full rules text.

## Using the library

```python
from oca.juego import Juego, Evento

juego = Juego()
juego.suscribir(Evento.JUEGO_GANADO, lambda nombre: print(nombre, "gana"))
juego.iniciar(2)
while not juego.terminado:
    juego.jugar_turno()
    # after a special square, Evento.MENSAJE_PARA_MOSTRAR is raised;
    # call juego.continuar_turno() to finish the turn
```

The main pieces are:

- `oca.juego.Juego`: runs turns and reports what happens through the events
  in `Evento`. It accepts any object with a `tirar()` method as its die.
- `oca.tablero.Tablero`: the board and its squares.
- `oca.casillas`: the square types (`CasillaNormal`, `CasillaOca`,
  `CasillaPuente`, `CasillaCastigo`).
- `oca.jugador.Jugador`: a player's position and penalty state.
- `oca.dado.Dado`: a six-sided die, optionally driven by a `random.Random`.
- `oca.espiral`: `coordenadas_espiral`, `tipo_casilla` and `dibujar_tablero`
  for the spiral layout and its text drawing.
- `oca.cli`: `reglas()`, `jugar()` and `main()` behind the `oca` command.

## What it does not do

The game runs in the terminal only: there is no graphical window and no
artwork for the squares. Games cannot be saved or resumed, and player names
cannot be chosen.

## Tests

```
pip install ".[test]"
pytest
```