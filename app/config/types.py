from dataclasses import dataclass


@dataclass(frozen=True)
class GameConfig:
    level_name: str
    step_size: int
    render_resolution: int


AppConfig = GameConfig
