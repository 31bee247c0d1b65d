import io
import random

import pytest

from batalha.armas import Cajado, Colher, Escudo, EscudoDeFerro
from batalha.personagens import Anao, Chaves, Feiticeiro
from batalha.simulador import Simulador


def _feiticeiro(ident, nome, vida=10):
    return Feiticeiro(ident, nome, vida, Cajado("Cajado", 0, 25), Escudo("Escudo", 0))


def _inofensivo(ident, nome, vida=10):
    return Chaves(ident, nome, vida, Colher("Colher", 5, 5), Escudo("Escudo", 0))


def test_invalid_team_on_add():
    sim = Simulador(random.Random(0))
    with pytest.raises(ValueError):
        sim.adicionar_personagem(_feiticeiro(1, "a"), 3)


def test_invalid_team_on_life_total():
    sim = Simulador(random.Random(0))
    with pytest.raises(ValueError):
        sim.calcular_vida_equipe(0)


def test_team_life_is_sum_of_members():
    sim = Simulador(random.Random(0))
    sim.adicionar_personagem(_feiticeiro(1, "a", 7), 1)
    sim.adicionar_personagem(_feiticeiro(2, "b", 11), 1)
    sim.adicionar_personagem(_feiticeiro(3, "c", 4), 2)
    assert sim.calcular_vida_equipe(1) == 7 + 11
    assert sim.calcular_vida_equipe(2) == 4


def test_remove_member():
    sim = Simulador(random.Random(0))
    a, b = _feiticeiro(1, "a", 7), _feiticeiro(2, "b", 11)
    sim.adicionar_personagem(a, 1)
    sim.adicionar_personagem(b, 1)
    sim.remover_personagem(a, 1)
    assert sim.calcular_vida_equipe(1) == 11


def test_remove_missing_member_raises():
    sim = Simulador(random.Random(0))
    sim.adicionar_personagem(_feiticeiro(1, "a"), 1)
    with pytest.raises(ValueError):
        sim.remover_personagem(_feiticeiro(2, "b"), 1)
    with pytest.raises(ValueError):
        sim.remover_personagem(_feiticeiro(1, "a"), 2)


def test_empty_teams_play_no_rounds():
    sim = Simulador(random.Random(0))
    assert list(sim.rodadas()) == []


def test_zero_damage_round_has_no_battle_cry():
    sim = Simulador(random.Random(3))
    sim.adicionar_personagem(_inofensivo(1, "A"), 1)
    sim.adicionar_personagem(_inofensivo(2, "B"), 2)
    texto = next(sim.rodadas())
    assert "Dano causado = 0\n" in texto
    assert "Eii, nao contava com a minha astucia?" not in texto
    assert sim.calcular_vida_equipe(1) == 10
    assert sim.calcular_vida_equipe(2) == 10


def test_defence_above_attack_causes_no_damage():
    sim = Simulador(random.Random(5))
    tanque_a = Anao(1, "A", 10, Colher("Colher", 0, 2), EscudoDeFerro("Ferro", 9))
    tanque_b = Anao(2, "B", 10, Colher("Colher", 0, 2), EscudoDeFerro("Ferro", 9))
    sim.adicionar_personagem(tanque_a, 1)
    sim.adicionar_personagem(tanque_b, 2)
    rodadas = sim.rodadas()
    for _ in range(5):
        next(rodadas)
    assert (tanque_a.vida, tanque_b.vida) == (10, 10)


def test_lethal_round_ends_battle():
    sim = Simulador(random.Random(1))
    a, b = _feiticeiro(1, "A"), _feiticeiro(2, "B")
    sim.adicionar_personagem(a, 1)
    sim.adicionar_personagem(b, 2)
    relatorios = list(sim.rodadas())
    assert len(relatorios) == 1
    assert sorted([a.vida, b.vida]) == [0, 10]
    texto = relatorios[0]
    assert "Que as chamas da magia queimem brilhantemente!" in texto
    assert "ira atacar o" in texto
    assert "com a sua arma Cajado\t[0,25]" in texto


@pytest.mark.parametrize("semente", range(6))
def test_battle_finishes_with_one_team_down(semente):
    sim = Simulador(random.Random(semente))
    personagens = []
    for ident in range(1, 4):
        for equipe in (1, 2):
            p = Chaves(ident, f"P{ident}-{equipe}", 10, Colher("Colher", 0, 6), Escudo("e", 2))
            personagens.append(p)
            sim.adicionar_personagem(p, equipe)
    list(sim.rodadas())
    vidas = (sim.calcular_vida_equipe(1), sim.calcular_vida_equipe(2))
    assert min(vidas) == 0
    assert max(vidas) > 0
    assert all(p.vida >= 0 for p in personagens)


def test_report_ends_with_team_totals():
    sim = Simulador(random.Random(2))
    sim.adicionar_personagem(_feiticeiro(1, "A"), 1)
    sim.adicionar_personagem(_feiticeiro(2, "B"), 2)
    texto = next(sim.rodadas())
    linhas = texto.rstrip("\n").split("\n")
    esperado = (
        f"Equipe 1 {sim.calcular_vida_equipe(1)} x {sim.calcular_vida_equipe(2)} Equipe 2"
    )
    assert linhas[-2] == esperado
    assert linhas[0] == linhas[-1]
    assert set(linhas[0]) == {"-"}


def test_iniciar_simulacao_writes_every_round():
    sim = Simulador(random.Random(4))
    for ident in range(1, 3):
        sim.adicionar_personagem(_feiticeiro(ident, f"A{ident}"), 1)
        sim.adicionar_personagem(_feiticeiro(ident + 10, f"B{ident}"), 2)
    saida = io.StringIO()
    sim.iniciar_simulacao(saida)
    texto = saida.getvalue()
    assert texto.count("Dano causado = ") == texto.count("O personagem ")
    assert texto.endswith("\n\n")
    assert min(sim.calcular_vida_equipe(1), sim.calcular_vida_equipe(2)) == 0