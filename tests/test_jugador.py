from oca.casillas import CasillaCastigo, CasillaNormal, CasillaPuente
from oca.jugador import EstadoJugador, Jugador


def test_new_player_defaults():
    jugador = Jugador("Jugador 1")
    assert jugador.nombre == "Jugador 1"
    assert jugador.posicion == 0
    assert jugador.turnos_perdidos == 0
    assert jugador.estado is EstadoJugador.NO_CASTIGADO
    assert jugador.castigado is False


def test_first_move_from_outside_board_places_directly():
    jugador = Jugador("Jugador 1", posicion=-1)
    assert jugador.mover(4) is None
    assert jugador.posicion == 4


def test_normal_move_adds():
    jugador = Jugador("Jugador 1", posicion=10)
    jugador.mover(3)
    assert jugador.posicion == 13


def test_exact_goal_does_not_bounce():
    jugador = Jugador("Jugador 1", posicion=60)
    assert jugador.mover(3) is None
    assert jugador.posicion == 63


def test_overshoot_bounces_back():
    jugador = Jugador("Jugador 1", posicion=62)
    mensaje = jugador.mover(3)
    assert jugador.posicion == 61
    assert mensaje is not None
    assert mensaje.startswith("¡Te pasaste de la casilla 63!")
    assert str(jugador.posicion) in mensaje


def test_bounce_never_exceeds_goal():
    for inicio in range(57, 64):
        for tirada in range(1, 7):
            jugador = Jugador("J", posicion=inicio)
            jugador.mover(tirada)
            assert jugador.posicion <= 63


def test_reset_estado_clears_penalty():
    jugador = Jugador("J", turnos_perdidos=2, estado=EstadoJugador.CASTIGADO)
    assert jugador.castigado is True
    jugador.reset_estado()
    assert jugador.castigado is False
    assert jugador.turnos_perdidos == 0


def test_aplicar_efecto_casilla_delegates_to_square():
    jugador = Jugador("J", posicion=6)
    mensaje = jugador.aplicar_efecto_casilla(CasillaPuente(6))
    assert jugador.posicion == 12
    assert mensaje == "¡Has caído en el Puente (casilla 6)! Avanza hasta la casilla 12."


def test_aplicar_efecto_casilla_normal_returns_empty():
    jugador = Jugador("J", posicion=3)
    assert jugador.aplicar_efecto_casilla(CasillaNormal(3)) == ""
    assert jugador.posicion == 3


def test_aplicar_efecto_casilla_castigo_marks_player():
    jugador = Jugador("J", posicion=19)
    jugador.aplicar_efecto_casilla(CasillaCastigo(19))
    assert jugador.castigado is True
    assert jugador.turnos_perdidos == 1


def test_players_with_same_name_are_independent():
    primero = Jugador("J", posicion=5)
    segundo = Jugador("J", posicion=5)
    primero.mover(3)
    assert primero.posicion == 8
    assert segundo.posicion == 5