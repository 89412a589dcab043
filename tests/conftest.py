from collections import deque
from typing import List

import pytest

from hexapawn.core import GameState, actions, is_terminal, new_game, result


def all_reachable_states() -> List[GameState]:
    start = new_game()
    seen = {start}
    queue = deque([start])
    while queue:
        state = queue.popleft()
        if is_terminal(state):
            continue
        for action in actions(state):
            child = result(state, action)
            if child not in seen:
                seen.add(child)
                queue.append(child)
    return list(seen)


@pytest.fixture(scope="session")
def reachable_states() -> List[GameState]:
    return all_reachable_states()
