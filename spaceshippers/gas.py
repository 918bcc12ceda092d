"""Gases and gas mixtures. Amounts are molar values in L*kPa."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from .item import StorageType


class GasType(Enum):
    """The gases the simulation knows about."""

    O2 = ("Oxygen", "The stuff we breath. It also explodes sometimes")
    CO2 = (
        "Carbon Dioxide",
        "The waste product of respiration. Poisonous at high concentrations. "
        "Rumoured to have destroyed the natural environment of the human race many centuries ago.",
    )
    N2 = (
        "Nitrogen",
        "Inert gas which comprises most of the standard atmosphere. Doesn't explode or anything.",
    )

    def __init__(self, label: str, description: str) -> None:
        self.label = label
        self.description = description


@dataclass
class Gas:
    """An amount of a single gas."""

    gas_type: GasType
    molar: float = 0.0

    @property
    def name(self) -> str:
        return self.gas_type.label

    @property
    def description(self) -> str:
        return self.gas_type.description

    @property
    def amount(self) -> float:
        return self.molar

    @amount.setter
    def amount(self, value: float) -> None:
        self.molar = value

    @property
    def storage_type(self) -> StorageType:
        return StorageType.GAS

    def change_amount(self, delta: float) -> None:
        """Change the amount; raises ValueError if it would become negative."""
        if self.molar + delta < 0:
            raise ValueError(f"cannot make the amount of {self.name} negative")
        self.molar += delta


@dataclass
class GasMixture:
    """A volume (L) of mixed gases at a temperature (K)."""

    volume: float = 0.0
    temp: float = 0.0
    gasses: dict[GasType, Gas] = field(default_factory=dict)
    total_molar: float = 0.0

    def init_vacuum(self, volume: float) -> None:
        """Remove all gas, leaving a vacuum of the given volume."""
        self.volume = volume
        self.total_molar = 0.0
        self.gasses = {}

    def init_atmosphere(self, volume: float, o2: float, pressure: float, temp: float) -> None:
        """Fill with O2 at partial pressure o2 and N2 making up the total pressure (kPa)."""
        self.temp = temp
        self.volume = volume
        self.add_gas(GasType.O2, o2 * volume)
        self.add_gas(GasType.N2, (pressure - o2) * volume)

    def init_standard_atmosphere(self, volume: float) -> None:
        """Fill with standard Earth sea-level air."""
        self.init_atmosphere(volume, 21, 101, 288)

    def add_gas(self, gas: GasType, molar: float) -> None:
        """Add an amount of a gas; the volume stays the same."""
        existing = self.gasses.get(gas)
        if existing is not None:
            existing.change_amount(molar)
        else:
            self.gasses[gas] = Gas(gas, molar)
        self.total_molar += molar

    def remove_gas(self, gas: GasType, molar: float) -> None:
        """Remove an amount of a gas, or all of it if there is not that much."""
        existing = self.gasses.get(gas)
        if existing is None:
            return
        if existing.amount <= molar:
            self.total_molar -= existing.amount
            del self.gasses[gas]
        else:
            self.total_molar -= molar
            existing.change_amount(-molar)

    def remove_volume(self, volume: float) -> GasMixture:
        """Take out a volume (L) of the mixture and return it as a new mixture."""
        if self.total_molar == 0:
            removed = GasMixture()
            removed.init_vacuum(volume)
            return removed

        if volume >= self.volume:
            removed = GasMixture(
                volume=self.volume,
                temp=self.temp,
                gasses=self.gasses,
                total_molar=self.total_molar,
            )
            self.init_vacuum(self.volume)
            return removed

        removed = GasMixture(volume=volume, temp=self.temp)
        fraction = volume / self.volume
        for gas_type, gas in list(self.gasses.items()):
            amount = gas.amount * fraction
            self.remove_gas(gas_type, amount)
            removed.add_gas(gas_type, amount)
        return removed

    def pressure(self) -> float:
        """Total pressure in kPa."""
        return self.total_molar / self.volume

    def partial_pressure(self, gas: GasType) -> float:
        """Partial pressure of one gas in kPa, zero if absent."""
        existing = self.gasses.get(gas)
        if existing is None:
            return 0.0
        return existing.amount / self.volume

    def molar_value(self, gas: GasType) -> float:
        """Molar value of one gas, zero if absent."""
        existing = self.gasses.get(gas)
        return existing.amount if existing is not None else 0.0

    def add_mixture(self, other: GasMixture) -> None:
        """Add every gas of another mixture to this one."""
        for gas_type, gas in other.gasses.items():
            self.add_gas(gas_type, gas.molar)