"""Build the mansion World from its fixed layout.

The layout is a nested tuple ``(name, clue, left, right)`` per room, with
``None`` for a missing clue or path.
"""

from .table import SuspectTable
from .world import Room, World, create_room

RoomSpec = tuple[str, str | None, "RoomSpec | None", "RoomSpec | None"]

MANSION: RoomSpec = (
    "Hall de Entrada", None,
    (
        "Sala de Estar", "pegada no tapete",
        ("Cozinha", "faca com digitais", None, None),
        (
            "Jardim", None,
            ("Estufa", "pegada molhada", None, None),
            None,
        ),
    ),
    (
        "Biblioteca", "página arrancada do livro",
        ("Sala de Jantar", "vidro quebrado", None, None),
        (
            "Escritório", "bilhete rasgado",
            None,
            ("Quarto do Dono", "chave perdida", None, None),
        ),
    ),
)

# Insertion order matters only for chain order within a bucket.
CLUE_SUSPECTS: list[tuple[str, str]] = [
    ("pegada no tapete", "Carlos"),
    ("página arrancada do livro", "Mariana"),
    ("faca com digitais", "Carlos"),
    ("vidro quebrado", "Luisa"),
    ("bilhete rasgado", "Mariana"),
    ("pegada molhada", "Carlos"),
    ("chave perdida", "Luisa"),
]


def build_rooms(spec: RoomSpec | None) -> Room | None:
    """Create the room for spec and, recursively, its subtrees."""
    if spec is None:
        return None
    name, clue, left, right = spec
    room = create_room(name, clue)
    room.left = build_rooms(left)
    room.right = build_rooms(right)
    return room


def build_suspect_table(pairs: list[tuple[str, str]]) -> SuspectTable:
    table = SuspectTable()
    for clue, suspect in pairs:
        table.insert(clue, suspect)
    return table


def load_world(
    layout: RoomSpec = MANSION,
    associations: list[tuple[str, str]] = CLUE_SUSPECTS,
) -> World:
    """Build the World from a layout and its clue → suspect pairs."""
    root = build_rooms(layout)
    if root is None:
        raise ValueError("Mansion layout has no entrance room")
    return World(root=root, suspects=build_suspect_table(associations))
