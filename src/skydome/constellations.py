"""Static constellation line data.

Each group is a list of ``(ra1, dec1, ra2, dec2)`` segments in degrees.
Shapes are stylized, not catalog-perfect.
"""

from collections.abc import Iterable, Iterator

from skydome.models import Constellation, ConstellationEdge


def _group(name: str, segments: Iterable[tuple[float, float, float, float]]) -> Constellation:
    return Constellation(
        name=name, edges=tuple(ConstellationEdge(*seg) for seg in segments)
    )


CONSTELLATIONS: tuple[Constellation, ...] = (
    _group(
        "Orion",
        [
            (83.0017, -0.2991, 84.0534, -1.2019),  # Alnitak -> Alnilam
            (84.0534, -1.2019, 85.1897, -1.9426),  # Alnilam -> Mintaka
            (78.6345, -8.2016, 83.0017, -0.2991),  # Rigel -> Alnitak
            (85.1897, -1.9426, 88.7929, 7.4071),  # Mintaka -> Betelgeuse
            (78.6345, -8.2016, 81.2828, -17.9559),  # Rigel -> Saiph
            (81.2828, -17.9559, 83.0017, -0.2991),  # Saiph -> Alnitak
        ],
    ),
    _group(
        "Ursa Major (Big Dipper)",
        [
            (165.4600, 56.3824, 165.9321, 61.7508),  # Dubhe -> Merak
            (165.9321, 61.7508, 168.5269, 60.7167),  # Merak -> Phecda
            (168.5269, 60.7167, 177.2649, 65.7160),  # Phecda -> Megrez
            (177.2649, 65.7160, 183.8560, 57.0326),  # Megrez -> Alioth
            (183.8560, 57.0326, 188.4356, 55.9598),  # Alioth -> Mizar
            (188.4356, 55.9598, 193.5073, 55.9598),  # Mizar -> Alkaid
        ],
    ),
)


def iter_edges(constellations: Iterable[Constellation]) -> Iterator[ConstellationEdge]:
    """Flatten groups into segments, preserving group and segment order."""
    for constellation in constellations:
        yield from constellation.edges
