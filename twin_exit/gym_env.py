"""Gymnasium environment wrapper for Twin Exit.

Provides a structured observation that pairs a rendered RGBA image with an
info dictionary (character positions, phase, level config). Reward is ``1.0``
on the step that solves the level and ``0.0`` otherwise. ``terminated`` is
``True`` once solved; the puzzle has no losing state so ``truncated`` is
always ``False``.

Observation schema:

``{"image": np.ndarray(H,W,4), "info": {"characters": {...}, "status": {...}, "config": {...}}}``

Usage:

``env = TwinExitEnv(level_name="Twin Door")``

Customization hooks:
    * ``initial_state_fn``: Provide a callable that returns a fully built ``State``.
    * ``render_resolution`` sets the image width in pixels.
"""

import logging
from functools import partial
import gymnasium as gym
import numpy as np
from typing import Callable, Optional, Dict, Tuple, Any

from PIL.Image import Image as PILImage

from twin_exit.state import State
from twin_exit.actions import Action, GymAction
from twin_exit.levels import DEFAULT_LEVEL, build_level
from twin_exit.objectives import is_inside_goal
from twin_exit.renderer.frame import DEFAULT_RESOLUTION, Renderer
from twin_exit.step import step
from twin_exit.types import CharacterID

logger = logging.getLogger(__name__)

ObsType = Dict[str, Any]


def characters_observation_dict(state: State) -> Dict[str, Any]:
    """Per-character sub-observation: position and whether it is at the goal."""
    characters: Dict[str, Any] = {}
    for cid, pos in state.position.items():
        appearance = state.appearance.get(cid)
        characters[cid.value] = {
            "name": appearance.name if appearance else cid.value,
            "x": int(pos.x),
            "y": int(pos.y),
            "inside_goal": is_inside_goal(pos, state.goal, state.box_size),
        }
    return characters


def env_status_observation_dict(state: State) -> Dict[str, Any]:
    """Status portion of observation (phase, turn)."""
    return {
        "phase": "solved" if state.solved else "active",
        "turn": int(state.turn),
    }


def env_config_observation_dict(state: State) -> Dict[str, Any]:
    """Config portion of observation (function names, level, dimensions)."""
    move_fn_name = getattr(state.move_fn, "__name__", str(state.move_fn))
    objective_fn_name = getattr(state.objective_fn, "__name__", str(state.objective_fn))
    return {
        "level": state.level_name or "",
        "move_fn": move_fn_name,
        "objective_fn": objective_fn_name,
        "width": state.width,
        "height": state.height,
        "box_size": state.box_size,
        "step_size": state.step_size,
    }


class TwinExitEnv(gym.Env[ObsType, np.integer]):
    """Gymnasium ``Env`` implementation for Twin Exit.

    The action space is ``Discrete(len(GymAction))``; see
    :mod:`twin_exit.actions`.
    """

    metadata = {"render_modes": ["human", "image"]}

    def __init__(
        self,
        render_mode: str = "image",
        render_resolution: int = DEFAULT_RESOLUTION,
        level_name: str = DEFAULT_LEVEL,
        step_size: Optional[int] = None,
        initial_state_fn: Optional[Callable[[], State]] = None,
    ):
        """Create a new environment instance.

        Arguments:
            render_mode: "image" to return PIL image frames, "human" to open a window.
            render_resolution: Width (pixels) of rendered image; height is scaled.
            level_name: Key into :data:`twin_exit.levels.LEVEL_REGISTRY`.
            step_size: Optional override of the per-intent step in pixels.
            initial_state_fn: Callable returning an initial ``State``; overrides ``level_name``.
        """
        from gymnasium import spaces

        if initial_state_fn is None:
            if step_size is None:
                initial_state_fn = partial(build_level, level_name)
            else:
                initial_state_fn = partial(build_level, level_name, step_size)
        self._initial_state_fn = initial_state_fn
        self._render_mode = render_mode
        self._renderer = Renderer(resolution=render_resolution)

        self.state: Optional[State] = None

        sample = self._initial_state_fn()
        render_width: int = render_resolution
        render_height: int = round(sample.height / sample.width * render_width)

        def int_box(low: int, high: int) -> spaces.Box:
            return spaces.Box(
                low=np.array(low, dtype=np.int64),
                high=np.array(high, dtype=np.int64),
                shape=(),
                dtype=np.int64,
            )

        character_space = spaces.Dict(
            {
                "name": spaces.Text(max_length=32),
                "x": int_box(0, sample.width),
                "y": int_box(0, sample.height),
                "inside_goal": spaces.Discrete(2),
            }
        )

        self.observation_space = spaces.Dict(
            {
                "image": spaces.Box(
                    low=0,
                    high=255,
                    shape=(render_height, render_width, 4),
                    dtype=np.uint8,
                ),
                "info": spaces.Dict(
                    {
                        "characters": spaces.Dict(
                            {cid.value: character_space for cid in sample.position}
                        ),
                        "status": spaces.Dict(
                            {
                                "phase": spaces.Text(max_length=32),
                                "turn": int_box(0, 1_000_000_000),
                            }
                        ),
                        "config": spaces.Dict(
                            {
                                "level": spaces.Text(max_length=64),
                                "move_fn": spaces.Text(max_length=128),
                                "objective_fn": spaces.Text(max_length=128),
                                "width": int_box(1, 10_000),
                                "height": int_box(1, 10_000),
                                "box_size": int_box(1, 10_000),
                                "step_size": int_box(1, 10_000),
                            }
                        ),
                    }
                ),
            }
        )

        self.action_space = spaces.Discrete(len(GymAction))

        self.reset()

    def reset(
        self, *, seed: Optional[int] = None, options: Optional[Dict[str, object]] = None
    ) -> Tuple[ObsType, Dict[str, object]]:
        """Start a new episode.

        Arguments:
            seed: Unused; levels are authored and deterministic.
            options: Gymnasium options (unused).

        Returns:
            Observation dict and empty info dict per Gymnasium API.
        """
        super().reset(seed=seed)
        self.state = self._initial_state_fn()
        logger.info("Environment reset to level %s", self.state.level_name)
        return self._get_obs(), self._get_info()

    def step(
        self, action: np.integer
    ) -> Tuple[ObsType, float, bool, bool, Dict[str, object]]:
        """Apply one environment step.

        Arguments:
            action: Integer index into the ``GymAction`` enum.

        Returns:
            (observation, reward, terminated, truncated, info)
        """
        assert self.state is not None

        if not 0 <= int(action) < len(GymAction):
            raise ValueError(f"Invalid action: {action}")
        step_action = Action[GymAction(int(action)).name]

        was_solved = self.state.solved
        self.state = step(self.state, step_action)
        reward = 1.0 if self.state.solved and not was_solved else 0.0
        return self._get_obs(), reward, self.state.solved, False, self._get_info()

    def render(self, mode: Optional[str] = None) -> Optional[PILImage]:  # type: ignore
        """Render the current state.

        Args:
            mode: "human" to display, "image" to return a PIL image. Defaults to
                the instance's configured render mode.
        """
        render_mode = mode or self._render_mode
        assert self.state is not None
        img = self._renderer.render(self.state)
        if render_mode == "human":
            img.show()
            return None
        elif render_mode == "image":
            return img
        else:
            raise NotImplementedError(f"Render mode '{render_mode}' not supported.")

    def state_info(self) -> Dict[str, Dict[str, Any]]:
        """Return structured ``info`` sub-dict used in observations."""
        assert self.state is not None
        return {
            "characters": characters_observation_dict(self.state),
            "status": env_status_observation_dict(self.state),
            "config": env_config_observation_dict(self.state),
        }

    def position_of(self, cid: CharacterID) -> Tuple[int, int]:
        assert self.state is not None
        pos = self.state.position[cid]
        return pos.x, pos.y

    def _get_obs(self) -> ObsType:
        assert self.state is not None
        img = self._renderer.render(self.state)
        return {"image": np.array(img), "info": self.state_info()}

    def _get_info(self) -> Dict[str, object]:
        """Return the step info (empty placeholder for compatibility)."""
        return {}

    def close(self) -> None:
        """Release any renderer resources (no-op placeholder)."""
        pass
