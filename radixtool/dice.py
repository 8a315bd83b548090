import random


def roll_dice(count: int = 3, sides: int = 6, rng: random.Random | None = None) -> list[int]:
    if count < 1:
        raise ValueError("Roll at least one die.")
    if sides < 2:
        raise ValueError("A die needs at least two sides.")

    rng = rng or random
    return [rng.randint(1, sides) for _ in range(count)]
