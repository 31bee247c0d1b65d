"""Characters that fight in the battle simulation."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import ClassVar

from batalha.armas import ArmaAtaque, ArmaDefesa


@dataclass(eq=False)
class Personagem(ABC):
    """A fighter with a health total, an attack weapon and a defence item."""

    id: int
    nome: str
    vida: int
    arma_ataque: ArmaAtaque
    arma_defesa: ArmaDefesa

    _BONUS_ATAQUE: ClassVar[int] = 0
    _BONUS_DEFESA: ClassVar[int] = 0

    def gerar_ataque(self) -> int:
        """Return the strength of this character's attack."""
        return self.arma_ataque.gerar_forca_ataque() + self._BONUS_ATAQUE

    def criar_defesa(self) -> int:
        """Return how much damage this character absorbs."""
        return self.arma_defesa.resistencia + self._BONUS_DEFESA

    @abstractmethod
    def pegar_descricao(self) -> str:
        """Return the character's battle cry."""


class Anao(Personagem):
    """Dwarf: sturdier defence."""

    _BONUS_DEFESA = 3

    def pegar_descricao(self) -> str:
        return "Pela honra, erguemos nossos machados!"


class Cavaleiro(Personagem):
    """Knight: slightly better attack and defence."""

    _BONUS_ATAQUE = 1
    _BONUS_DEFESA = 2

    def pegar_descricao(self) -> str:
        return "Cavalgamos pela justica!"


class Chaves(Personagem):
    """Plain fighter relying only on equipment."""

    def pegar_descricao(self) -> str:
        return "Eii, nao contava com a minha astucia?"


class Clerigo(Personagem):
    """Cleric relying only on equipment."""

    def pegar_descricao(self) -> str:
        return "Pela luz divina!"


class Elfo(Personagem):
    """Elf: stronger attack."""

    _BONUS_ATAQUE = 3

    def pegar_descricao(self) -> str:
        return "Natureza, seja nossa aliada!"


class Feiticeiro(Personagem):
    """Sorcerer: the strongest attack."""

    _BONUS_ATAQUE = 5

    def pegar_descricao(self) -> str:
        return "Que as chamas da magia queimem brilhantemente!"