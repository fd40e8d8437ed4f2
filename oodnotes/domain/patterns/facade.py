"""Facade pattern - one simple interface over a home theater's subsystems."""
from typing import List


class Amplifier:
    def __init__(self):
        self.volume = 0
        self.is_on = False

    def on(self) -> str:
        self.is_on = True
        return "Amplifier on"

    def set_volume(self, level: int) -> str:
        self.volume = level
        return f"Amplifier setting volume to {level}"

    def off(self) -> str:
        self.is_on = False
        return "Amplifier off"


class Projector:
    def __init__(self):
        self.is_on = False
        self.mode = "standard"

    def on(self) -> str:
        self.is_on = True
        return "Projector on"

    def wide_screen_mode(self) -> str:
        self.mode = "widescreen"
        return "Projector in widescreen mode (16x9 aspect ratio)"

    def off(self) -> str:
        self.is_on = False
        return "Projector off"


class StreamingPlayer:
    def __init__(self):
        self.movie = None

    def on(self) -> str:
        return "Streaming player on"

    def play(self, movie: str) -> str:
        self.movie = movie
        return f'Streaming player playing "{movie}"'

    def stop(self) -> str:
        stopped = self.movie
        self.movie = None
        return f'Streaming player stopped "{stopped}"'

    def off(self) -> str:
        return "Streaming player off"


class TheaterLights:
    def __init__(self):
        self.level = 100

    def dim(self, level: int) -> str:
        self.level = level
        return f"Theater ceiling lights dimming to {level}%"

    def on(self) -> str:
        self.level = 100
        return "Theater ceiling lights on"


class HomeTheaterFacade:
    def __init__(
        self,
        amplifier: Amplifier,
        projector: Projector,
        player: StreamingPlayer,
        lights: TheaterLights,
    ):
        self.amplifier = amplifier
        self.projector = projector
        self.player = player
        self.lights = lights

    def watch_movie(self, movie: str, volume: int = 5) -> List[str]:
        return [
            "Get ready to watch a movie...",
            self.lights.dim(10),
            self.projector.on(),
            self.projector.wide_screen_mode(),
            self.amplifier.on(),
            self.amplifier.set_volume(volume),
            self.player.on(),
            self.player.play(movie),
        ]

    def end_movie(self) -> List[str]:
        return [
            "Shutting movie theater down...",
            self.lights.on(),
            self.projector.off(),
            self.amplifier.off(),
            self.player.stop(),
            self.player.off(),
        ]
