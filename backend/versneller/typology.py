"""Typology resolution from free-text building-type labels.

Labels come from residence records ("Portiekflat", "galerijflat",
"Eengezinswoning", ...). Matching is a case-insensitive substring test in
fixed priority: ``portiek`` wins over ``galerij``/``gallerij``, and anything
else falls back to ground-bound housing.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from versneller.models.enums import Typology

if TYPE_CHECKING:
    from versneller.models.building import BuildingDescriptor

_GALLERY_MARKERS = ("galerij", "gallerij")


def resolve_typology(building_type_label: str | None) -> Typology:
    """Map a building-type label to its canonical typology.

    An empty or unrecognised label resolves to ``Typology.GRONDGEBONDEN``.
    """
    label = (building_type_label or "").lower()
    if "portiek" in label:
        return Typology.PORTIEK
    if any(marker in label for marker in _GALLERY_MARKERS):
        return Typology.GALLERIJ
    return Typology.GRONDGEBONDEN


def typology_for_building(building: BuildingDescriptor) -> Typology:
    """Resolve a building's typology, preferring its explicit flags."""
    if building.portiekflat:
        return Typology.PORTIEK
    if building.galerieflat:
        return Typology.GALLERIJ
    if building.grondgebonden:
        return Typology.GRONDGEBONDEN
    return resolve_typology(building.type_label)
