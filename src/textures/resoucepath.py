from player.clips import Activity
from player.direction import Direction

ASSETS_PATH: str = "./assets/"

# Terrain
GRASS_TEXTURE_PATH: str = ASSETS_PATH + "grass_1.png"
GRASS2_TEXTURE_PATH: str = ASSETS_PATH + "grass_2.png"
GRASS3_TEXTURE_PATH: str = ASSETS_PATH + "grass_3.png"

# Props
TREE1_TEXTURE_PATH: str = ASSETS_PATH + "tree-1.png"
TREE2_TEXTURE_PATH: str = ASSETS_PATH + "tree-2.png"
STUMP_TEXTURE_PATH: str = ASSETS_PATH + "tronco.png"

# Player: sprite_player/<direction>/<activity>/<index>.png
PLAYER_SPRITES_PATH: str = ASSETS_PATH + "sprite_player/"


def player_clip_dir(direction: Direction, activity: Activity, root: str = PLAYER_SPRITES_PATH) -> str:
    return f"{root}{direction.name.lower()}/{activity.value}"


def player_frame_path(
    direction: Direction, activity: Activity, index: int, root: str = PLAYER_SPRITES_PATH
) -> str:
    return f"{player_clip_dir(direction, activity, root)}/{index}.png"
