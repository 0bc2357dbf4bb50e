from collections import defaultdict

import pytest

from oca.jugador import EstadoJugador
from oca.juego import Evento, Juego


class _DadoFijo:
    def __init__(self, *valores):
        self._valores = list(valores)
        self.tiradas = 0

    def tirar(self):
        self.tiradas += 1
        return self._valores.pop(0)


def _juego(num, *valores):
    dado = _DadoFijo(*valores)
    juego = Juego(dado)
    eventos = defaultdict(list)
    for evento in Evento:
        juego.suscribir(evento, lambda *args, e=evento: eventos[e].append(args))
    juego.iniciar(num)
    return juego, dado, eventos


def test_iniciar_crea_jugadores_fuera_del_tablero():
    juego, _, eventos = _juego(3)
    nombres = [j.nombre for j in juego.jugadores]
    assert nombres == ["Jugador 1", "Jugador 2", "Jugador 3"]
    assert all(j.posicion == -1 for j in juego.jugadores)
    assert eventos[Evento.JUEGO_INICIADO] == [(3,)]
    assert juego.turno == 0
    assert not juego.terminado


def test_iniciar_sin_jugadores_falla():
    with pytest.raises(ValueError):
        Juego(_DadoFijo()).iniciar(0)


def test_jugar_sin_iniciar_falla():
    with pytest.raises(RuntimeError):
        Juego(_DadoFijo(1)).jugar_turno()


def test_turno_normal_avanza_turno():
    juego, _, eventos = _juego(2, 3)
    juego.jugar_turno()
    assert juego.jugadores[0].posicion == 3
    assert eventos[Evento.DADO_LANZADO] == [(3,)]
    assert eventos[Evento.JUGADOR_MOVIDO] == [(0, -1, 3), (0, -1, 3)]
    assert eventos[Evento.TURNO_CAMBIADO] == [("Jugador 2",)]
    assert juego.turno == 1


def test_puente_espera_continuar():
    juego, _, eventos = _juego(2, 6)
    juego.jugar_turno()
    assert juego.jugadores[0].posicion == 12
    assert eventos[Evento.MENSAJE_PARA_MOSTRAR] == [
        ("¡Has caído en el Puente (casilla 6)! Avanza hasta la casilla 12.",)
    ]
    assert juego.turno == 0
    juego.continuar_turno()
    assert juego.turno == 1
    assert eventos[Evento.TURNO_REPETIDO] == []


def test_oca_repite_turno():
    juego, _, eventos = _juego(2, 6)
    juego.jugadores[0].posicion = 3
    juego.jugar_turno()
    assert juego.jugadores[0].posicion == 18
    juego.continuar_turno()
    assert eventos[Evento.TURNO_REPETIDO] == [()]
    assert juego.turno == 0


def test_ganador_termina_el_juego():
    juego, dado, eventos = _juego(2, 3, 1)
    juego.jugadores[0].posicion = 60
    juego.jugar_turno()
    assert juego.terminado
    assert juego.verificar_ganador() == 0
    assert eventos[Evento.JUEGO_GANADO] == [("Jugador 1",)]
    juego.jugar_turno()
    assert dado.tiradas == 1


def test_sin_ganador_al_inicio():
    juego, _, _ = _juego(4)
    assert juego.verificar_ganador() is None


def test_rebote_al_pasarse_de_la_meta():
    juego, _, eventos = _juego(2, 6)
    juego.jugadores[0].posicion = 60
    juego.jugar_turno()
    assert juego.jugadores[0].posicion == 60
    assert len(eventos[Evento.REBOTE]) == 1
    assert not juego.terminado


def test_posada_pierde_un_turno():
    juego, _, eventos = _juego(2, 6, 2, 1, 1)
    juego.jugadores[0].posicion = 13
    juego.jugar_turno()
    assert juego.jugadores[0].posicion == 19
    assert juego.jugadores[0].estado is EstadoJugador.CASTIGADO
    juego.continuar_turno()
    juego.jugar_turno()
    assert juego.jugadores[1].posicion == 2
    juego.jugar_turno()
    assert juego.jugadores[0].posicion == 19
    assert juego.jugadores[1].posicion == 3
    juego.jugar_turno()
    assert juego.jugadores[0].posicion == 20
    assert eventos[Evento.JUGADOR_CASTIGADO] == [("Jugador 1", 1), ("Jugador 1", 0)]
    assert not juego.jugadores[0].castigado


def test_pozo_atrapa_hasta_que_otro_caiga():
    juego, _, eventos = _juego(2, 2, 1, 1)
    juego.jugadores[0].posicion = 29
    juego.jugar_turno()
    assert juego.jugadores[0].posicion == 31
    assert juego.jugadores[0].turnos_perdidos == -1
    juego.continuar_turno()
    juego.jugar_turno()
    juego.jugar_turno()
    assert juego.jugadores[0].posicion == 31
    assert juego.jugadores[1].posicion == 2
    assert eventos[Evento.JUGADOR_CASTIGADO] == [("Jugador 1", -1)]


def test_jugadores_devuelve_copia():
    juego, _, _ = _juego(2)
    lista = juego.jugadores
    lista.clear()
    assert len(juego.jugadores) == 2