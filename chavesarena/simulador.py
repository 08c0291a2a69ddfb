"""Team battle simulation between two groups of characters."""

from __future__ import annotations

import random
from collections.abc import Iterator

from chavesarena.personagens import Personagem

_SEPARADOR = "---------------------------------------------------------"


class Simulador:
    """Holds two teams and runs random duels until one team is defeated."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self.rng = rng if rng is not None else random.Random()
        self._equipes: dict[int, list[Personagem]] = {1: [], 2: []}

    def _equipe(self, equipe: int) -> list[Personagem]:
        try:
            return self._equipes[equipe]
        except KeyError:
            raise ValueError(f"invalid team: {equipe}") from None

    def adicionar_personagem(self, personagem: Personagem, equipe: int) -> None:
        """Add a character to team 1 or 2."""
        self._equipe(equipe).append(personagem)

    def remover_personagem(self, personagem: Personagem, equipe: int) -> bool:
        """Remove the first member with the same id; return whether one was found."""
        membros = self._equipe(equipe)
        for posicao, membro in enumerate(membros):
            if membro.id == personagem.id:
                del membros[posicao]
                return True
        return False

    def vida_equipe(self, equipe: int) -> int:
        """Return the total hit points of a team."""
        return sum(p.vida for p in self._equipe(equipe))

    def _proximo(self, equipe: int) -> Personagem | None:
        vivos = [p for p in self._equipe(equipe) if p.vida > 0]
        return self.rng.choice(vivos) if vivos else None

    def combate(self, atacante: Personagem, defensor: Personagem) -> int:
        """Resolve one attack, update the defender's hit points and return the damage."""
        dano = max(0, atacante.gerar_ataque() - defensor.criar_defesa())
        defensor.vida = max(0, defensor.vida - dano)
        return dano

    def relatorio(self, atacante: Personagem, defensor: Personagem, dano: int) -> str:
        """Describe one attack and the resulting standings."""
        partes = [
            _SEPARADOR + "\n",
            f"O personagem {atacante.nome} ira atacar o {defensor.nome}\n",
            f"com a sua arma {atacante.arma_ataque.descricao_completa()}\n",
            f"Dano causado = {dano}\n",
        ]
        if dano > 0:
            partes.append(f"{atacante.nome}: {atacante.bordao()}")
        partes.append(
            f"\nVIDA:\n{atacante.nome} [{atacante.vida}] {defensor.nome} [{defensor.vida}]"
        )
        partes.append(
            f"\nEquipe 1 {self.vida_equipe(1)} x {self.vida_equipe(2)} Equipe 2"
        )
        partes.append("\n" + _SEPARADOR + "\n")
        return "".join(partes)

    def rodadas(self) -> Iterator[str]:
        """Fight round after round while both teams live, yielding each report."""
        while self.vida_equipe(1) > 0 and self.vida_equipe(2) > 0:
            if self.rng.randrange(2) == 0:
                atacante, defensor = self._proximo(1), self._proximo(2)
            else:
                atacante, defensor = self._proximo(2), self._proximo(1)
            assert atacante is not None and defensor is not None
            dano = self.combate(atacante, defensor)
            yield self.relatorio(atacante, defensor, dano)

    def iniciar_simulacao(self) -> None:
        """Run the whole battle, printing each round."""
        for saida in self.rodadas():
            print(saida)