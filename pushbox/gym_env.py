"""Gymnasium environment wrapper for pushbox.

Provides a structured observation that pairs a rendered RGBA image with an
info dictionary (player position, box progress, board config). Reward is
``1.0`` on the step that solves the board and ``0.0`` otherwise;
``terminated`` is ``True`` once the board is won. There is no truncation:
wrap with ``gymnasium.wrappers.TimeLimit`` to cap episode length.

Observation schema:

``{
    "image": np.ndarray(H,W,4),
    "info": {
            "player": {"x": int, "y": int},
            "status": {"phase": str, "turn": int, "boxes_on_target": int, "boxes": int},
            "config": {...},
            "message": str  # empty string if None
    }
}``

or

``
Level  # if observation_type="level"
``

Usage:

``
from pushbox.gym_env import PushBoxEnv

env = PushBoxEnv(map_name="1")
obs, info = env.reset()
obs, reward, terminated, truncated, info = env.step(Action.RIGHT)
``
"""

import string
import gymnasium as gym
from gymnasium import spaces

import numpy as np
from typing import Optional, Dict, Tuple, Any, TypedDict, cast, Union
from numpy.typing import NDArray

from PIL.Image import Image as PILImage

from pushbox.actions import Action
from pushbox.components import EntityKind
from pushbox.entity import new_player_id
from pushbox.levels.convert import from_state
from pushbox.levels.grid import Level
from pushbox.levels.loader import MapSource, bundled_map_source
from pushbox.levels.text import load_from_text
from pushbox.objectives import default_objective_fn
from pushbox.renderer.image import DEFAULT_RESOLUTION, render
from pushbox.state import State
from pushbox.step import step
from pushbox.systems.spawn import spawn_player
from pushbox.types import EntityID, ObjectiveFn
from pushbox.utils.ecs import positions_of_kind


class PlayerInfo(TypedDict):
    """Player position on the board."""

    x: int
    y: int


class StatusInfo(TypedDict):
    """Environment status (phase, turn, box progress)."""

    phase: str  # "win" | "ongoing"
    turn: int
    boxes_on_target: int
    boxes: int


class ConfigInfo(TypedDict):
    """Static config describing the active map."""

    map_name: str
    objective_fn: str
    width: int
    height: int


class InfoDict(TypedDict):
    """Full structured info payload accompanying every observation."""

    player: PlayerInfo
    status: StatusInfo
    config: ConfigInfo
    message: str  # Status message ("" if none)


ImageArray = NDArray[np.uint8]


class Observation(TypedDict):
    """Top-level observation returned by the environment.

    image: RGBA image array (H x W x 4, dtype=uint8)
    info:  Structured dictionaries (see :class:`InfoDict`).
    """

    image: ImageArray
    info: InfoDict


def player_observation_dict(state: State, player_id: EntityID) -> PlayerInfo:
    """Player sub-observation."""
    pos = state.position[player_id]
    return cast(PlayerInfo, {"x": int(pos.x), "y": int(pos.y)})


def env_status_observation_dict(state: State) -> StatusInfo:
    """Status portion of observation (phase, turn, box progress)."""
    boxes = positions_of_kind(state, EntityKind.BOX)
    spots = positions_of_kind(state, EntityKind.TARGET_SPOT)
    return cast(
        StatusInfo,
        {
            "phase": "win" if state.win else "ongoing",
            "turn": int(state.turn),
            "boxes_on_target": len(boxes & spots),
            "boxes": len(boxes),
        },
    )


def env_config_observation_dict(state: State, map_name: str) -> ConfigInfo:
    """Config portion of observation (map name, objective, dimensions)."""
    objective_fn_name = getattr(state.objective_fn, "__name__", str(state.objective_fn))
    return cast(
        ConfigInfo,
        {
            "map_name": map_name,
            "objective_fn": objective_fn_name,
            "width": state.width,
            "height": state.height,
        },
    )


class PushBoxEnv(gym.Env[Union[Observation, Level], np.integer]):
    """Gymnasium ``Env`` implementation for pushbox maps.

    The action space is ``Discrete(len(Action))``; see :mod:`pushbox.actions`.
    """

    metadata = {"render_modes": ["human", "rgb_array"]}

    def __init__(
        self,
        map_name: str = "1",
        map_source: Optional[MapSource] = None,
        objective_fn: ObjectiveFn = default_objective_fn,
        render_mode: str = "rgb_array",
        render_resolution: int = DEFAULT_RESOLUTION,
        observation_type: str = "image",
    ):
        """Create a new environment instance.

        Args:
            map_name (str): Name of the map to play, resolved through ``map_source``.
            map_source (MapSource | None): Where map text comes from; defaults to
                the bundled maps.
            objective_fn (ObjectiveFn): Win condition for the map.
            render_mode (str): "rgb_array" to return PIL image frames, "human" to open a window.
            render_resolution (int): Width (pixels) of rendered image (height derived).
            observation_type (str): "image" for image + info dicts, "level" for a
                mutable ``Level`` blueprint.
        """
        if observation_type not in {"image", "level"}:
            raise ValueError(
                f"Unsupported observation_type '{observation_type}'. Expected 'image' or 'level'."
            )
        self._observation_type = observation_type
        self._render_mode = render_mode
        self._render_resolution = render_resolution

        self.map_name = map_name
        self._map_text = (map_source or bundled_map_source()).load(map_name)
        self._objective_fn = objective_fn

        # Runtime state
        self.player_id: EntityID = new_player_id()
        self.state: Optional[State] = None
        self._initial_state = spawn_player(
            load_from_text(self._map_text, objective_fn=objective_fn), self.player_id
        )

        self.width: int = self._initial_state.width
        self.height: int = self._initial_state.height
        render_width: int = render_resolution
        render_height: int = max(
            (render_width * max(self.height, 1)) // max(self.width, 1), 1
        )

        text_space = spaces.Text(
            max_length=128,
            min_length=0,
            charset=string.ascii_letters + string.digits + "_- ",
        )

        def int_box(low: int, high: int) -> spaces.Box:
            return spaces.Box(
                low=np.array(low, dtype=np.int64),
                high=np.array(high, dtype=np.int64),
                shape=(),
                dtype=np.int64,
            )

        if self._observation_type == "image":
            self.observation_space = cast(
                gym.Space[Observation],
                spaces.Dict(
                    {
                        "image": spaces.Box(
                            low=0,
                            high=255,
                            shape=(render_height, render_width, 4),
                            dtype=np.uint8,
                        ),
                        "info": spaces.Dict(
                            {
                                "player": spaces.Dict(
                                    {
                                        "x": int_box(-1_000_000, 1_000_000),
                                        "y": int_box(-1_000_000, 1_000_000),
                                    }
                                ),
                                "status": spaces.Dict(
                                    {
                                        "phase": text_space,
                                        "turn": int_box(0, 1_000_000_000),
                                        "boxes_on_target": int_box(0, 1_000_000),
                                        "boxes": int_box(0, 1_000_000),
                                    }
                                ),
                                "config": spaces.Dict(
                                    {
                                        "map_name": text_space,
                                        "objective_fn": text_space,
                                        "width": int_box(0, 10_000),
                                        "height": int_box(0, 10_000),
                                    }
                                ),
                                "message": text_space,
                            }
                        ),
                    }
                ),
            )
        else:
            # Level observations are arbitrary Python objects; Discrete(1) is a placeholder.
            self.observation_space = spaces.Discrete(1)

        self.action_space = spaces.Discrete(len(Action))

        self.reset()

    def reset(
        self, *, seed: Optional[int] = None, options: Optional[Dict[str, object]] = None
    ) -> Tuple[Union[Observation, Level], Dict[str, object]]:
        """Start a new episode from the map's initial layout.

        Args:
            seed (int | None): Unused; maps are deterministic.
            options (dict | None): Gymnasium options (unused).
        """
        super().reset(seed=seed)
        self.state = self._initial_state
        return self._get_obs(), self._get_info()

    def step(
        self, action: np.integer | int | Action
    ) -> Tuple[Union[Observation, Level], float, bool, bool, Dict[str, object]]:
        """Apply one environment step.

        Args:
            action (int | np.integer | Action): Integer index (or ``Action`` enum
                member) selecting an action from the discrete action space.

        Returns:
            Tuple[Observation, float, bool, bool, dict]: ``(observation, reward, terminated, truncated, info)``.
        """
        assert self.state is not None

        if isinstance(action, Action):
            step_action = action
        else:
            try:
                action_index = int(action)
            except Exception as exc:
                raise TypeError(
                    f"Action must be int-compatible or Action; got {type(action)!r}"
                ) from exc

            if not 0 <= action_index < len(Action):
                raise ValueError(
                    f"Invalid action index {action_index}; expected 0..{len(Action) - 1}"
                )

            step_action = list(Action)[action_index]

        was_won = self.state.win
        self.state = step(self.state, step_action, player_id=self.player_id)
        reward = 1.0 if self.state.win and not was_won else 0.0
        return self._get_obs(), reward, self.state.win, False, self._get_info()

    def render(self, mode: Optional[str] = None) -> Optional[PILImage]:  # type: ignore
        """Render the current state.

        Args:
            mode (str | None): "human" to display, "rgb_array" to return PIL image. Defaults to
                the instance's configured render mode.
        """
        render_mode = mode or self._render_mode
        assert self.state is not None
        img = render(self.state, resolution=self._render_resolution)
        if render_mode == "human":
            img.show()
            return None
        elif render_mode == "rgb_array":
            return img
        else:
            raise NotImplementedError(f"Render mode '{render_mode}' not supported.")

    def state_info(self) -> InfoDict:
        """Return structured ``info`` sub-dict used in observations."""
        assert self.state is not None
        return {
            "player": player_observation_dict(self.state, self.player_id),
            "status": env_status_observation_dict(self.state),
            "config": env_config_observation_dict(self.state, self.map_name),
            "message": self.state.message or "",
        }

    def _get_obs(self) -> Union[Observation, Level]:
        assert self.state is not None
        if self._observation_type == "level":
            return from_state(self.state)

        img = render(self.state, resolution=self._render_resolution)
        img_np: ImageArray = np.array(img)
        return cast(Observation, {"image": img_np, "info": self.state_info()})

    def _get_info(self) -> Dict[str, object]:
        """Return the step info (empty placeholder for compatibility)."""
        return {}

    def close(self) -> None:
        """Release any renderer resources (no-op placeholder)."""
        pass
