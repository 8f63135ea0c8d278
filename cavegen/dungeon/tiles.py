# Tile constants centralized for modular imports
EMPTY = "."
WALL = "#"
PLAYER = "@"
ENEMY = "E"
DOOR = "D"
KEY = "K"
DAGGER = "/"
END = "X"

MARKERS = frozenset({PLAYER, ENEMY, DOOR, KEY, DAGGER, END})
ALL_TILES = frozenset({EMPTY, WALL}) | MARKERS

# Sequence used when no explicit marker list is configured
DEFAULT_MARKERS = (PLAYER, DAGGER, ENEMY, KEY, DOOR)

TILE_NAMES = {
    EMPTY: "empty",
    WALL: "wall",
    PLAYER: "player",
    ENEMY: "enemy",
    DOOR: "door",
    KEY: "key",
    DAGGER: "dagger",
    END: "end",
}
_NAME_TO_TILE = {name: tile for tile, name in TILE_NAMES.items()}


def is_passable(tile: str) -> bool:
    """Only walls block movement; every marker sits on open floor."""
    return tile != WALL


def tile_from_name(name: str) -> str:
    """Resolve a marker name (``"player"``) or raw tile char (``"@"``) to a tile; raises KeyError."""
    key = name.strip().lower()
    if key in _NAME_TO_TILE:
        return _NAME_TO_TILE[key]
    if name.strip() in ALL_TILES:
        return name.strip()
    raise KeyError(name)


__all__ = [
    "EMPTY",
    "WALL",
    "PLAYER",
    "ENEMY",
    "DOOR",
    "KEY",
    "DAGGER",
    "END",
    "MARKERS",
    "ALL_TILES",
    "DEFAULT_MARKERS",
    "TILE_NAMES",
    "is_passable",
    "tile_from_name",
]
