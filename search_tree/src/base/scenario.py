from dataclasses import dataclass


@dataclass(frozen=True)
class Scenario:
    title: str
    keys: list[int]
