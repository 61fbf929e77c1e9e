"""Introductory story shown when a new game starts."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Optional

DEFAULT_INPUT_LIMIT = 100


@dataclass
class Scene:
    """One page of the story, optionally asking the player for text."""

    text: str
    image_path: str = ""
    requires_input: bool = False
    input_label: str = ""
    input_limit: int = DEFAULT_INPUT_LIMIT
    on_input_confirmed: Optional[Callable[[str], None]] = None


def default_scenes() -> list[Scene]:
    """The scenes that open a new game; the third asks for the zoo's name."""
    return [
        Scene(
            "И так!\nШо ты воин прибыл из другой галактики!\n"
            "Ну хуй с ним давай я тебе покажу шо тут а как, ты ток внимай внимательно!",
            "misc/image/88ec3916f3f1df6e4dfe252ec12c5a66.jpg",
        ),
        Scene(
            "Добро пожаловать, директор, в ваш новый зоопарк!\n"
            "Я буду твоим помошником на всем твоем пути!",
            "misc/image/maxresdefault.jpg",
        ),
        Scene(
            "Здес мы будем сра.. кхм собирать самыех эксклюзивных существ.\n"
            "Для начала, давай придумаем название для нашего зоопарка.\n"
            "Как насчэт \"Моий Остроовов в Океане\"?",
            "misc/image/7e76bbe1fea72737301ed58017475e77.jpg",
            requires_input=True,
            input_label="Название зоопарка",
        ),
        Scene(
            "Отрично название есть!\n"
            "Я позову своих фанатов и у нас появяться посетители.",
            "misc/image/screenshot_44.jpg",
        ),
    ]


@dataclass
class Storyline:
    """Walks the player through a sequence of scenes."""

    scenes: list[Scene] = field(default_factory=default_scenes)
    index: int = 0
    is_open: bool = False
    last_input: Optional[str] = None

    def add_scene(self, scene: Scene) -> None:
        self.scenes.append(scene)

    def go_to(self, index: int) -> None:
        """Jump to a scene; indexes out of range are ignored."""
        if 0 <= index < len(self.scenes):
            self.index = index

    def next(self) -> None:
        """Move forward, closing the story after the last scene."""
        if self.index < len(self.scenes) - 1:
            self.index += 1
        else:
            self.is_open = False

    def previous(self) -> None:
        if self.index > 0:
            self.index -= 1

    def open(self) -> None:
        """Open the story at its first scene."""
        self.is_open = True
        self.index = 0

    def current(self) -> Optional[Scene]:
        """The scene being shown, or None when the index is past the end."""
        if 0 <= self.index < len(self.scenes):
            return self.scenes[self.index]
        return None

    def confirm_input(self, text: str) -> str:
        """Accept the player's text for the current scene and move on.

        The text is cut to fit the scene's input limit. Raises ValueError if
        the scene asks for no input or the text is empty.
        """
        scene = self.current()
        if scene is None or not scene.requires_input:
            raise ValueError("the current scene does not ask for input")
        value = text[: max(scene.input_limit - 1, 0)]
        if not value:
            raise ValueError("Введи название")
        self.last_input = value
        if scene.on_input_confirmed is not None:
            scene.on_input_confirmed(value)
        self.next()
        return value