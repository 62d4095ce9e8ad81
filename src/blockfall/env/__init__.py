"""Gymnasium environments for blockfall."""

from __future__ import annotations

from gymnasium.envs.registration import register

register(
    id="FallingBlocks-10x20-v0",
    entry_point="blockfall.env.falling_block_env:FallingBlockEnv",
)

__all__ = ["FallingBlocks-10x20-v0"]
