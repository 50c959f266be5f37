"""Lockstep input buffer example.

Run with: python examples/lockstep_inputs.py
"""

import logging
from dataclasses import dataclass

from tickqueue import QueueSettings, TickQueue, WrongTickOrderError


@dataclass
class PlayerInput:
    jump: bool = False
    move: int = 0


def main() -> None:
    logging.basicConfig(level=logging.DEBUG)

    inputs: TickQueue[PlayerInput] = TickQueue(
        initial_tick=0, settings=QueueSettings(keep_sequence_on_drain=True)
    )
    inputs.push(0, PlayerInput(move=1))
    inputs.push(1, PlayerInput(jump=True))

    try:
        inputs.push(3, PlayerInput(move=-1))
    except WrongTickOrderError as err:
        print(f"Desync: expected {err.expected}, got {err.received}")

    for tick, player_input in inputs.iter_with_tick():
        print(f"Tick {tick}: {player_input}")

    inputs.discard_count(2)
    print(f"Next expected tick after drain: {inputs.expected_tick}")


if __name__ == "__main__":
    main()
