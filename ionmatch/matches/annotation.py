"""
Peak annotation labels.

Labels are built as a list of (text, subscript) tokens, then rendered either
as plain text or as HTML with <sub> tags.
"""

from typing import List, Tuple

from ..ions import Ion, IonType, charge_to_string

Token = Tuple[str, bool]


def charge_suffix(charge: int) -> str:
    """Charge suffix of a label, empty for charge 1."""
    return "" if charge == 1 else charge_to_string(charge)


def _loss_tokens(neutral_losses: str) -> List[Token]:
    return [(c, c.isdigit()) for c in neutral_losses]


def annotation_tokens(ion: Ion, charge: int) -> List[Token]:
    """
    Split the annotation of an ion at a charge into tokens.

    Args:
        ion: Annotated ion
        charge: Charge

    Returns:
        List of (text, subscript) tuples
    """
    if ion.type == IonType.PEPTIDE_FRAGMENT_ION:
        tokens = [(ion.sub_type_as_string, False), (str(ion.number), True)]
    elif ion.type == IonType.TAG_FRAGMENT_ION:
        tokens = [(ion.sub_type_as_string, False), (str(ion.sub_number), True)]
    elif ion.type == IonType.PRECURSOR_ION:
        tokens = [(ion.sub_type_as_string, False), ("-", False)]
    else:
        return [(ion.name, False)]

    tokens.append((charge_suffix(charge), False))
    tokens.extend(_loss_tokens(ion.neutral_losses_as_string))
    return tokens


def plain_annotation(ion: Ion, charge: int) -> str:
    return "".join(text for text, _ in annotation_tokens(ion, charge))


def html_annotation(ion: Ion, charge: int) -> str:
    body = "".join(
        f"<sub>{text}</sub>" if subscript else text
        for text, subscript in annotation_tokens(ion, charge)
    )
    return f"<html>{body}</html>"


def peak_annotation(ion: Ion, charge: int, html: bool = False) -> str:
    """
    Get the annotation to use for an ion at a charge.

    Args:
        ion: Annotated ion
        charge: Charge
        html: If True, return HTML with subscript tags

    Returns:
        Annotation label, e.g. "b3" or "y52+-H2O"
    """
    if html:
        return html_annotation(ion, charge)
    return plain_annotation(ion, charge)
