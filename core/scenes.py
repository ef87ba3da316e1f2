"""
Preset scene catalog.

Nine fixed light scenes. Order matters: horizontal drags on the color fill
step through this list by position. The scene name is the lookup key; the
generated id is informational only.
"""

import uuid
from dataclasses import dataclass, field
from typing import Dict, Optional, Tuple


@dataclass(frozen=True)
class SceneItem:
    """One preset as shown in the scene grid."""

    name: str
    icon: str
    description: str
    id: uuid.UUID = field(default_factory=uuid.uuid4, compare=False)


# (brightness, saturation, hue)
SceneValues = Tuple[float, float, float]


_SCENES: Tuple[SceneItem, ...] = (
    SceneItem("自然光", "sun.max", "自然舒适的光线"),
    SceneItem("暖光", "sunset", "温暖橙黄色调"),
    SceneItem("冷光", "moon", "清爽蓝色光线"),
    SceneItem("柔和光", "cloud.sun", "柔和米色光线"),
    SceneItem("少女感", "heart", "温暖粉嫩色调"),
    SceneItem("磨皮感", "wand.and.stars", "柔和自然光线"),
    SceneItem("冷白皮", "snowflake", "清透冷色调"),
    SceneItem("网感紫", "sparkles", "时尚紫色光线"),
    SceneItem("DeepSeek蓝", "rays", "科技蓝色光线"),
)

_SCENE_VALUES: Dict[str, SceneValues] = {
    "自然光": (0.5, 0.7, 0.1),        # slightly warm natural tone
    "暖光": (0.6, 0.8, 0.08),         # orange-yellow
    "冷光": (0.5, 0.6, 0.6),          # crisp blue
    "柔和光": (0.4, 0.5, 0.05),       # soft beige
    "少女感": (0.7, 0.6, 0.95),       # warm pink
    "磨皮感": (0.65, 0.4, 0.08),      # soft natural
    "冷白皮": (0.75, 0.3, 0.6),       # clear cool
    "网感紫": (0.6, 0.7, 0.8),        # purple
    "DeepSeek蓝": (0.55, 0.75, 0.65), # tech blue
}


def list_scenes() -> Tuple[SceneItem, ...]:
    """Return the catalog in display order."""
    return _SCENES


def scene_count() -> int:
    return len(_SCENES)


def scene_names() -> Tuple[str, ...]:
    return tuple(s.name for s in _SCENES)


def get_scene(name: str) -> Optional[SceneItem]:
    for scene in _SCENES:
        if scene.name == name:
            return scene
    return None


def index_of(name: str) -> Optional[int]:
    """Position of a scene in the catalog, or None if the name is unknown."""
    for i, scene in enumerate(_SCENES):
        if scene.name == name:
            return i
    return None


def scene_values(name: str) -> Optional[SceneValues]:
    """Fixed (brightness, saturation, hue) of a scene, or None if unknown."""
    return _SCENE_VALUES.get(name)


def first_scene_name() -> str:
    return _SCENES[0].name
