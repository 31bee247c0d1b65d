# batalha

A small battle simulator. Two teams of characters fight in random rounds
until one team has no life left. Each character carries an attack weapon
and a piece of defensive gear, and each class adds its own bonus to attack
or defence.

## Installing

```
pip install .
```

## Running the demo battle

```
batalha
```

This sets up two teams of five characters (a cleric, a knight, an elf, a
dwarf and a sorcerer on each side) and prints every round to standard
output. Each round report shows who attacks whom, the weapon used with its
strength range, the damage dealt, the attacker's battle cry when the blow
does damage, the life of both fighters and the total life of each team.

The command takes no options beyond `--help`.

## Using it as a library

```python
import random

from batalha.armas import Espada, Armadura
from batalha.personagens import Cavaleiro, Elfo
from batalha.simulador import Simulador

espada = Espada("Espada Do Dragao", 0, 15)
armadura = Armadura("Armadura Divina", 5)

simulador = Simulador(random.Random(42))
simulador.adicionar_personagem(Cavaleiro(1, "Cavaleiro", 10, espada, armadura), 1)
simulador.adicionar_personagem(Elfo(2, "Elfo", 10, espada, armadura), 2)

for texto in simulador.rodadas():
    print(texto)
```

### `batalha.simulador.Simulador`

- `Simulador(rng=None)`: pass a `random.Random` for reproducible battles;
  without one a fresh generator is used.
- `adicionar_personagem(personagem, equipe)`: adds a character to team `1`
  or `2`.
- `remover_personagem(personagem, equipe)`: removes the first member of the
  team with the same `id`; raises `ValueError` if there is none.
- `calcular_vida_equipe(equipe)`: total life of a team.
- `rodadas()`: a generator that plays rounds until one team has no life
  left, yielding each round's report. In each round a random team attacks
  and a random living member of each side is chosen.
- `iniciar_simulacao(saida=None)`: plays the whole battle and writes every
  report to the text stream `saida` (standard output by default).

Any team number other than `1` or `2` raises `ValueError`.

`batalha.principal.criar_simulador(rng=None)` returns the demo battle,
ready to run, and `batalha.principal.main()` is what the `batalha` command
calls.

### Weapons (`batalha.armas`)

Attack weapons derive from `ArmaAtaque` and have `descricao`, `min_forca`
and `max_forca`. `descricao_arma()` gives the name followed by the range,
`gerar_forca_ataque()` the attack strength and `gerar_ruido_ataque()` the
attack sound. `ArcoElfico`, `Cajado`, `Colher`, `Espada`, `LivroDivino` and
`Machado` strike with `max_forca - min_forca`; `Rosa` always strikes with
`max_forca`.

Defensive gear derives from `ArmaDefesa` and has `descricao_arma` and
`resistencia`: `AmuletoDivino`, `Armadura`, `CapaDaFurtividade`, `Escudo`,
`EscudoDeFerro`, `PergaminhoDeProtecao`. `ArmaDefesa` itself cannot be
created.

### Characters (`batalha.personagens`)

Every character derives from `Personagem` and has `id`, `nome`, `vida`,
`arma_ataque` and `arma_defesa`. `gerar_ataque()` is the weapon's strength
plus the class bonus, `criar_defesa()` the gear's resistance plus the class
bonus, and `pegar_descricao()` the battle cry.

| Class        | Attack bonus | Defence bonus |
|--------------|--------------|---------------|
| `Anao`       | 0            | 3             |
| `Cavaleiro`  | 1            | 2             |
| `Chaves`     | 0            | 0             |
| `Clerigo`    | 0            | 0             |
| `Elfo`       | 3            | 0             |
| `Feiticeiro` | 5            | 0             |

Damage in a round is the attacker's attack minus the defender's defence,
never below zero, and a character's life never drops below zero. Since
weapon strength is fixed, two fighters whose attacks cannot beat each
other's defence will trade blows forever; build teams where damage can be
dealt.

## Tests

```
pip install .[test]
pytest
```