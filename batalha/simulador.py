"""Team battle simulation between two groups of characters."""

from __future__ import annotations

import random
import sys
from collections.abc import Iterator
from typing import TextIO

from batalha.personagens import Personagem

_SEPARADOR = "-" * 57


class Simulador:
    """Runs random rounds between team 1 and team 2 until one team falls."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng if rng is not None else random.Random()
        self._equipes: dict[int, list[Personagem]] = {1: [], 2: []}

    def _equipe(self, numero: int) -> list[Personagem]:
        try:
            return self._equipes[numero]
        except KeyError:
            raise ValueError(f"unknown team {numero!r}; expected 1 or 2") from None

    def adicionar_personagem(self, personagem: Personagem, equipe: int) -> None:
        """Add a character to team 1 or 2."""
        self._equipe(equipe).append(personagem)

    def remover_personagem(self, personagem: Personagem, equipe: int) -> None:
        """Remove the first member of the team sharing the character's id."""
        membros = self._equipe(equipe)
        posicao = next(
            (i for i, membro in enumerate(membros) if membro.id == personagem.id), None
        )
        if posicao is None:
            raise ValueError(f"character {personagem.id!r} is not in team {equipe}")
        del membros[posicao]

    def calcular_vida_equipe(self, equipe: int) -> int:
        """Return the total health of a team."""
        return sum(p.vida for p in self._equipe(equipe))

    def _proximo_personagem(self, membros: list[Personagem]) -> Personagem | None:
        vivos = [p for p in membros if p.vida > 0]
        return self._rng.choice(vivos) if vivos else None

    @staticmethod
    def _combate(atacante: Personagem, defensor: Personagem) -> int:
        dano = max(0, atacante.gerar_ataque() - defensor.criar_defesa())
        defensor.vida = max(0, defensor.vida - dano)
        return dano

    def _saida(self, atacante: Personagem, defensor: Personagem, dano: int) -> str:
        grito = f"{atacante.nome}: {atacante.pegar_descricao()}" if dano > 0 else ""
        return (
            f"{_SEPARADOR}\n"
            f"O personagem {atacante.nome} ira atacar o {defensor.nome}\n"
            f"com a sua arma {atacante.arma_ataque.descricao_arma()}\n"
            f"Dano causado = {dano}\n"
            f"{grito}"
            f"\nVIDA:\n{atacante.nome} [{atacante.vida}] {defensor.nome} [{defensor.vida}]"
            f"\nEquipe 1 {self.calcular_vida_equipe(1)} x "
            f"{self.calcular_vida_equipe(2)} Equipe 2"
            f"\n{_SEPARADOR}\n"
        )

    def rodadas(self) -> Iterator[str]:
        """Play rounds until a team has no health left, yielding each report."""
        while self.calcular_vida_equipe(1) > 0 and self.calcular_vida_equipe(2) > 0:
            ataca, defende = (1, 2) if self._rng.randrange(2) == 0 else (2, 1)
            atacante = self._proximo_personagem(self._equipes[ataca])
            defensor = self._proximo_personagem(self._equipes[defende])
            if atacante is None or defensor is None:
                return
            dano = self._combate(atacante, defensor)
            yield self._saida(atacante, defensor, dano)

    def iniciar_simulacao(self, saida: TextIO | None = None) -> None:
        """Run the whole battle, writing every round report to ``saida``."""
        destino = saida if saida is not None else sys.stdout
        for relatorio in self.rodadas():
            print(relatorio, file=destino)