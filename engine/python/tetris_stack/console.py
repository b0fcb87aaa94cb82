#!/usr/bin/env python3
"""Text menu front-end for the piece queue / reserve stack engine.

Usage:
    python -m tetris_stack.console [seed]
"""

import sys
from typing import Callable, Dict, List, Optional

from tetris_stack.env import Command, Observation, StackEnv

MENU_OPTIONS: Dict[int, Command] = {
    1: Command.PLAY,
    2: Command.RESERVE,
    3: Command.USE_RESERVE,
    4: Command.SWAP_ONE,
    5: Command.SWAP_THREE,
}

MENU_TEXT = """
Available options:
1 - Play the piece at the front of the queue
2 - Move the front piece to the reserve stack
3 - Use the piece on top of the reserve stack
4 - Swap the queue front with the reserve stack top
5 - Swap the first 3 queue pieces with the 3 reserve pieces
0 - Exit"""


def render_state(obs: Observation) -> str:
    """Format queue and stack contents for display.

    Args:
        obs: Current observation

    Returns:
        Multi-line state block
    """
    queue = " ".join(str(p) for p in obs.queue) if obs.queue else "(empty)"
    stack = " ".join(str(p) for p in obs.stack) if obs.stack else "(empty)"
    return "\n".join([
        "",
        "--- CURRENT STATE ---",
        f"Piece queue: {queue}",
        f"Reserve stack (top -> bottom): {stack}",
        "-" * 21,
    ])


def parse_option(raw: str) -> Optional[int]:
    """Parse a menu selection, returning None for anything unrecognised."""
    try:
        option = int(raw.strip())
    except ValueError:
        return None
    if option != 0 and option not in MENU_OPTIONS:
        return None
    return option


def run_console(
    env: StackEnv,
    read: Callable[[str], str] = input,
    write: Callable[[str], None] = print,
) -> int:
    """Run the menu loop until the player exits.

    Args:
        env: Environment that has already been reset
        read: Prompt-and-read function
        write: Output function

    Returns:
        Number of commands executed
    """
    commands_run = 0
    obs = env.observe()

    while True:
        write(render_state(obs))
        write(MENU_TEXT)
        try:
            raw = read("Chosen option: ")
        except EOFError:
            write("\nExiting Tetris Stack. See you next time!")
            break

        option = parse_option(raw)
        if option is None:
            write("\nInvalid option. Try again.")
            continue
        if option == 0:
            write("\nExiting Tetris Stack. See you next time!")
            break

        result = env.step(MENU_OPTIONS[option])
        commands_run += 1
        write(f"\nAction: {result.message}")
        obs = result.obs

    return commands_run


def main(argv: Optional[List[str]] = None) -> None:
    """Start an interactive session."""
    args = sys.argv[1:] if argv is None else argv
    try:
        seed = int(args[0]) if args else None
    except ValueError:
        print(f"Usage: tetris-stack [seed]  (seed must be an integer, got {args[0]!r})")
        sys.exit(2)

    env = StackEnv()
    env.reset(seed)
    run_console(env)


if __name__ == "__main__":
    main()
