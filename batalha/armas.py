"""Attack and defence weapons carried by the characters."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass
class ArmaAtaque(ABC):
    """A weapon that deals damage within a ``[min_forca, max_forca]`` range."""

    descricao: str
    min_forca: int
    max_forca: int

    def descricao_arma(self) -> str:
        """Return the weapon's name followed by its strength range."""
        return f"{self.descricao}\t[{self.min_forca},{self.max_forca}]"

    @abstractmethod
    def gerar_forca_ataque(self) -> int:
        """Return the strength of one attack."""

    @abstractmethod
    def gerar_ruido_ataque(self) -> str:
        """Return the sound the weapon makes when it strikes."""


class _ArmaDeAmplitude(ArmaAtaque):
    """Attack weapon whose strength is the width of its range."""

    def gerar_forca_ataque(self) -> int:
        return self.max_forca - self.min_forca


class ArcoElfico(_ArmaDeAmplitude):
    """Elven bow."""

    def gerar_ruido_ataque(self) -> str:
        return "Swooosh "


class Cajado(_ArmaDeAmplitude):
    """Magic staff."""

    def gerar_ruido_ataque(self) -> str:
        return "Zaaap"


class Colher(_ArmaDeAmplitude):
    """Spoon."""

    def gerar_ruido_ataque(self) -> str:
        return "cush cush"


class Espada(_ArmaDeAmplitude):
    """Sword."""

    def gerar_ruido_ataque(self) -> str:
        return "Clang"


class LivroDivino(_ArmaDeAmplitude):
    """Holy book."""

    def gerar_ruido_ataque(self) -> str:
        return "Flip Flip Flip"


class Machado(_ArmaDeAmplitude):
    """Axe."""

    def gerar_ruido_ataque(self) -> str:
        return "Thunk"


class Rosa(ArmaAtaque):
    """Rose: always strikes with its maximum strength."""

    def gerar_forca_ataque(self) -> int:
        return self.max_forca

    def gerar_ruido_ataque(self) -> str:
        return "plin plin"


@dataclass
class ArmaDefesa:
    """A protective item that absorbs ``resistencia`` points of damage."""

    descricao_arma: str
    resistencia: int

    def __post_init__(self) -> None:
        if type(self) is ArmaDefesa:
            raise TypeError("ArmaDefesa is abstract; use a concrete defence item")


class AmuletoDivino(ArmaDefesa):
    """Holy amulet."""


class Armadura(ArmaDefesa):
    """Armour."""


class CapaDaFurtividade(ArmaDefesa):
    """Cloak of stealth."""


class Escudo(ArmaDefesa):
    """Shield."""


class EscudoDeFerro(ArmaDefesa):
    """Iron shield."""


class PergaminhoDeProtecao(ArmaDefesa):
    """Scroll of protection."""