"""Command that runs the default five-against-five battle."""

from __future__ import annotations

import argparse
import random

from batalha.armas import (
    AmuletoDivino,
    ArcoElfico,
    Armadura,
    Cajado,
    CapaDaFurtividade,
    EscudoDeFerro,
    Espada,
    LivroDivino,
    Machado,
    PergaminhoDeProtecao,
)
from batalha.personagens import Anao, Cavaleiro, Clerigo, Elfo, Feiticeiro
from batalha.simulador import Simulador


def criar_simulador(rng: random.Random | None = None) -> Simulador:
    """Build a simulator holding the two standard teams."""
    armas = [
        LivroDivino("Biblia", 0, 12),
        Espada("Espada Do Dragao", 0, 15),
        ArcoElfico("Arco Elfico Divino", 0, 8),
        Machado("Machado Vulcanico", 0, 19),
        Cajado("Cajado De Esmeraldas", 0, 25),
    ]
    escudos = [
        AmuletoDivino("Amuleto Das Sombras", 5),
        Armadura("Armadura Divina", 5),
        CapaDaFurtividade("Capa Da Furtividade Flamejante", 4),
        EscudoDeFerro("Escudo De Ferro Dos Anoes", 9),
        PergaminhoDeProtecao("Pergaminho De Protecao De Jade", 8),
    ]
    classes = [Clerigo, Cavaleiro, Elfo, Anao, Feiticeiro]
    vidas = {1: [10, 10, 10, 12, 10], 2: [10, 10, 10, 10, 10]}

    simulador = Simulador(rng)
    for equipe, vidas_equipe in vidas.items():
        for classe, vida, arma, escudo in zip(classes, vidas_equipe, armas, escudos):
            nome = f"{classe.__name__} Eq{equipe}"
            simulador.adicionar_personagem(classe(1, nome, vida, arma, escudo), equipe)
    return simulador


def main(argv: list[str] | None = None) -> int:
    """Run the standard battle and print every round."""
    parser = argparse.ArgumentParser(
        prog="batalha", description="Simulate a battle between two teams."
    )
    parser.parse_args(argv)
    criar_simulador().iniciar_simulacao()
    return 0