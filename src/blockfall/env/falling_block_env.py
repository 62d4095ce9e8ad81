from __future__ import annotations

from typing import Any, Dict, Optional, Tuple

import numpy as np
import gymnasium as gym
from gymnasium import spaces

from blockfall.game import Action, FallingBlockGame, GameConfig, ScoringRules
from blockfall.visualization.palette import color_for_value


# Pause is a front-end concern; the agent only steers the falling piece.
AGENT_ACTIONS = (Action.NONE, Action.LEFT, Action.RIGHT, Action.ROTATE, Action.SOFT_DROP)


class FallingBlockEnv(gym.Env):
    """Single-session environment around `FallingBlockGame`.

    Each step applies one player action and then advances a synthetic clock
    by `frame_ms`, feeding it to `tick` so gravity follows the engine's own
    drop interval.
    """

    metadata = {"render_modes": ["rgb_array"], "render_fps": 30}

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        rules: Optional[ScoringRules] = None,
        render_mode: Optional[str] = None,
        frame_ms: int = 100,
        max_episode_steps: int = 10000,
    ) -> None:
        super().__init__()
        self.config = config or GameConfig()
        self.rules = rules
        self.game = FallingBlockGame(self.config, self.rules)
        self.render_mode = render_mode
        self.frame_ms = int(frame_ms)
        self.max_episode_steps = int(max_episode_steps)

        h, w = self.config.height, self.config.width
        self.observation_space = spaces.Box(low=-7, high=7, shape=(h, w), dtype=np.int8)
        self.action_space = spaces.Discrete(len(AGENT_ACTIONS))

        self._clock_ms = 0
        self._steps = 0

    def _get_info(self) -> Dict[str, Any]:
        snap = self.game.snapshot()
        return {
            "score": snap.score,
            "level": snap.level,
            "lines": snap.lines,
            "steps": self._steps,
        }

    def reset(self, *, seed: Optional[int] = None, options: Optional[dict] = None) -> Tuple[np.ndarray, Dict[str, Any]]:
        super().reset(seed=seed)
        # Route piece selection through the env's seeded generator
        self.game = FallingBlockGame(self.config, self.rules, rng=self.np_random)
        self._clock_ms = 0
        self._steps = 0
        self.game.start_game(self._clock_ms)
        return self.game.get_state(), self._get_info()

    def step(self, action: int):
        score_before = self.game.score
        self.game.step(AGENT_ACTIONS[int(action)])
        self._clock_ms += self.frame_ms
        self.game.tick(self._clock_ms)
        self._steps += 1

        reward = float(self.game.score - score_before)
        terminated = bool(self.game.game_over)
        truncated = self._steps >= self.max_episode_steps and not terminated
        return self.game.get_state(), reward, terminated, truncated, self._get_info()

    def render(self) -> Optional[np.ndarray]:
        if self.render_mode != "rgb_array":
            return None
        state = self.game.get_state()
        cell = 12
        h, w = state.shape
        img = np.zeros((h * cell, w * cell, 3), dtype=np.uint8)
        for y in range(h):
            for x in range(w):
                img[y * cell : (y + 1) * cell, x * cell : (x + 1) * cell, :] = color_for_value(int(state[y, x]))
        return img

    def close(self) -> None:
        pass
