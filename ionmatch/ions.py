"""
Ion module.

This module contains the theoretical ions that peaks can be matched to. Each
kind of ion is a frozen dataclass tagged with an IonType, so code that needs
to treat ion kinds differently switches on ``ion.type``.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Tuple

from .constants import (
    PROTON_MASS,
    WATER_MASS,
    CARBON_MONOXIDE_MASS,
    FRAGMENT_ION_SUBTYPES,
    IMMONIUM_ION_SUBTYPES,
    NEUTRAL_LOSS_FORMULAS,
    TMT_6PLEX_MZ,
)
from .masses import formula_mass, peptide_mass


class IonType(Enum):
    """Supported ion types, valued by their index."""

    PEPTIDE_FRAGMENT_ION = 0
    TAG_FRAGMENT_ION = 1
    PRECURSOR_ION = 2
    IMMONIUM_ION = 3
    REPORTER_ION = 4
    GLYCAN = 5
    ELEMENTARY_ION = 6
    UNKNOWN = 7
    RELATED_ION = 8

    @property
    def index(self) -> int:
        return self.value

    @property
    def description(self) -> str:
        return self.name.replace("_", " ").capitalize()


@dataclass(frozen=True)
class NeutralLoss:
    """A small molecule lost during fragmentation."""

    name: str
    composition: str

    def __post_init__(self):
        # Names end up inside "_"-delimited match keys
        if not self.name or "_" in self.name:
            raise ValueError(f"Invalid neutral loss name: {self.name!r}")

    @property
    def mass(self) -> float:
        return formula_mass(self.composition)


NEUTRAL_LOSSES = {
    name: NeutralLoss(name, formula) for name, formula in NEUTRAL_LOSS_FORMULAS.items()
}
H2O = NEUTRAL_LOSSES["H2O"]
NH3 = NEUTRAL_LOSSES["NH3"]
H3PO4 = NEUTRAL_LOSSES["H3PO4"]


def neutral_losses_as_string(neutral_losses) -> str:
    """
    Get the neutral losses as a string, the empty string if none.

    Args:
        neutral_losses: Iterable of NeutralLoss objects

    Returns:
        Sorted loss names, each prefixed by "-", e.g. "-H2O-NH3"
    """
    if not neutral_losses:
        return ""
    return "".join(f"-{name}" for name in sorted(loss.name for loss in neutral_losses))


def charge_to_string(value: int) -> str:
    """
    Get a string representing a charge, for example 2+.

    Negative charges keep their sign before the suffix, for example -2-.

    Args:
        value: Charge value

    Returns:
        Charge as a string
    """
    if value == 0:
        return "0"
    return f"{value}+" if value > 0 else f"{value}-"


class Ion:
    """
    Base class for theoretical ions.

    Subclasses provide ``type``, ``sub_type``, ``mass`` and
    ``neutral_losses``.
    """

    type = IonType.UNKNOWN
    neutral_losses: Tuple[NeutralLoss, ...] = ()

    @property
    def theoretic_mass(self) -> float:
        return self.mass

    @property
    def sub_type_as_string(self) -> str:
        return str(self.sub_type)

    @property
    def neutral_losses_as_string(self) -> str:
        return neutral_losses_as_string(self.neutral_losses)

    @property
    def name(self) -> str:
        return self.sub_type_as_string + self.neutral_losses_as_string

    def has_neutral_losses(self) -> bool:
        return len(self.neutral_losses) > 0

    def theoretic_mz(self, charge: int) -> float:
        """
        Get the m/z expected for this ion at the given charge.

        Args:
            charge: Charge of interest

        Returns:
            Theoretical m/z
        """
        mz = self.theoretic_mass + PROTON_MASS
        if charge > 1:
            mz = (mz + (charge - 1) * PROTON_MASS) / charge
        return mz


@dataclass(frozen=True)
class PeptideFragmentIon(Ion):
    """Fragment of a peptide (a, b, c, x, y or z ion)."""

    sub_type: int
    number: int
    mass: float
    neutral_losses: Tuple[NeutralLoss, ...] = ()

    type = IonType.PEPTIDE_FRAGMENT_ION

    def __post_init__(self):
        if self.sub_type not in FRAGMENT_ION_SUBTYPES:
            raise ValueError(f"Unsupported fragment ion subtype: {self.sub_type}")
        object.__setattr__(self, "neutral_losses", tuple(self.neutral_losses))

    @property
    def sub_type_as_string(self) -> str:
        return FRAGMENT_ION_SUBTYPES[self.sub_type]


@dataclass(frozen=True)
class TagFragmentIon(Ion):
    """Fragment of a sequence tag; ``sub_number`` is the position within the tag component."""

    sub_type: int
    number: int
    sub_number: int
    mass: float
    neutral_losses: Tuple[NeutralLoss, ...] = ()

    type = IonType.TAG_FRAGMENT_ION

    def __post_init__(self):
        if self.sub_type not in FRAGMENT_ION_SUBTYPES:
            raise ValueError(f"Unsupported fragment ion subtype: {self.sub_type}")
        object.__setattr__(self, "neutral_losses", tuple(self.neutral_losses))

    @property
    def sub_type_as_string(self) -> str:
        return FRAGMENT_ION_SUBTYPES[self.sub_type]


@dataclass(frozen=True)
class PrecursorIon(Ion):
    """The intact peptide."""

    mass: float
    neutral_losses: Tuple[NeutralLoss, ...] = ()

    type = IonType.PRECURSOR_ION
    sub_type = 0

    def __post_init__(self):
        object.__setattr__(self, "neutral_losses", tuple(self.neutral_losses))

    @classmethod
    def from_sequence(cls, sequence: str, neutral_losses=()) -> "PrecursorIon":
        return cls(peptide_mass(sequence), tuple(neutral_losses))

    @property
    def sub_type_as_string(self) -> str:
        return "MH"


@dataclass(frozen=True)
class ReporterIon(Ion):
    """Isobaric labelling reporter ion."""

    label: str
    mass: float
    sub_type: int = 0

    type = IonType.REPORTER_ION

    @classmethod
    def from_mz(cls, label: str, mz: float, sub_type: int = 0) -> "ReporterIon":
        return cls(label, mz - PROTON_MASS, sub_type)

    @property
    def name(self) -> str:
        return self.label


@dataclass(frozen=True)
class ImmoniumIon(Ion):
    """Immonium ion of a single residue."""

    residue: str

    type = IonType.IMMONIUM_ION

    def __post_init__(self):
        if self.residue not in IMMONIUM_ION_SUBTYPES:
            raise ValueError(f"No immonium ion subtype for residue {self.residue!r}")

    @property
    def sub_type(self) -> int:
        return IMMONIUM_ION_SUBTYPES[self.residue]

    @property
    def mass(self) -> float:
        return peptide_mass(self.residue) - WATER_MASS - CARBON_MONOXIDE_MASS

    @property
    def name(self) -> str:
        return f"i{self.residue}"


@dataclass(frozen=True)
class ElementaryIon(Ion):
    """Elementary charged species such as the proton."""

    label: str
    mass: float
    sub_type: int = 0

    type = IonType.ELEMENTARY_ION

    def theoretic_mz(self, charge: int) -> float:
        return self.mass / charge if charge > 1 else self.mass

    @property
    def name(self) -> str:
        return self.label


ElementaryIon.PROTON = ElementaryIon("H+", PROTON_MASS)

TMT_6PLEX = tuple(
    ReporterIon.from_mz(label, mz, i) for i, (label, mz) in enumerate(TMT_6PLEX_MZ.items())
)


def get_reporter_ion(label: str) -> ReporterIon:
    """
    Get a standard reporter ion by its label.

    Args:
        label: Reporter label, e.g. "TMT126"

    Returns:
        ReporterIon object

    Raises:
        ValueError: If the label is unknown
    """
    for ion in TMT_6PLEX:
        if ion.label == label:
            return ion
    raise ValueError(f"Unknown reporter ion: {label}")
