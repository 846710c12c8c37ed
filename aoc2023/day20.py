"""Pulse Propagation: flip-flops and conjunctions wired into a network."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import Enum
from itertools import count
from typing import Optional, Union

from aoc2023.util import lcm

BROADCASTER = "broadcaster"
_ARROW = "->"
_FLIP_FLOP = "%"
_CONJUNCTION = "&"
_PRESSES = 1000


class Signal(Enum):
    NONE = 0
    LOW = 1
    HIGH = 2


@dataclass
class FlipFlop:
    name: str
    targets: list[str]
    on: bool = False
    last_source: Optional[str] = field(default=None, compare=False)

    def receive(self, signal: Signal, source: str) -> None:
        """Record which module sent the latest pulse; the state changes in emit."""
        self.last_source = source

    def emit(self, signal: Signal) -> Signal:
        """Toggle on a low pulse and report the new state; ignore high pulses."""
        if signal is Signal.LOW:
            self.on = not self.on
            return Signal.HIGH if self.on else Signal.LOW
        if signal is Signal.HIGH:
            return Signal.NONE
        raise ValueError("illegal signal type")


@dataclass
class Conjunction:
    name: str
    targets: list[str]
    inputs: dict[str, Signal] = field(default_factory=dict)

    def receive(self, signal: Signal, source: str) -> None:
        """Remember the last pulse seen from ``source``."""
        self.inputs[source] = signal

    def emit(self, signal: Signal) -> Signal:
        """Low if every remembered input is high, otherwise high."""
        if any(value is Signal.LOW for value in self.inputs.values()):
            return Signal.HIGH
        return Signal.LOW


Module = Union[FlipFlop, Conjunction]


@dataclass(frozen=True)
class _Pulse:
    sender: str
    node: str
    signal: Signal


def parse_modules(lines: list[str]) -> tuple[list[str], dict[str, Module]]:
    """The broadcaster's targets and all modules, with conjunction inputs set to low."""
    modules: dict[str, Module] = {}
    broadcaster: list[str] = []
    for line in lines:
        head, arrow, tail = line.partition(_ARROW)
        if not arrow:
            raise ValueError(f"missing '{_ARROW}' in {line!r}")
        targets = [target.strip() for target in tail.split(",")]
        name = head.strip()
        if not name:
            raise ValueError(f"missing module name in {line!r}")
        if name.startswith(_FLIP_FLOP):
            modules[name[1:]] = FlipFlop(name[1:], targets)
        elif name.startswith(_CONJUNCTION):
            modules[name[1:]] = Conjunction(name[1:], targets)
        else:
            broadcaster = targets

    for module in modules.values():
        if isinstance(module, Conjunction):
            module.inputs = {
                source.name: Signal.LOW
                for source in modules.values()
                if module.name in source.targets
            }
    return broadcaster, modules


def _press(broadcaster: list[str], modules: dict[str, Module]) -> Iterator[_Pulse]:
    """Push the button once, yielding every pulse in the order it is delivered."""
    queue = deque(_Pulse(BROADCASTER, node, Signal.LOW) for node in broadcaster)
    while queue:
        pulse = queue.popleft()
        yield pulse
        module = modules.get(pulse.node)
        if module is None:
            continue
        module.receive(pulse.signal, pulse.sender)
        signal = module.emit(pulse.signal)
        if signal is not Signal.NONE:
            queue.extend(_Pulse(pulse.node, target, signal) for target in module.targets)


def propagate_counting(broadcaster: list[str], modules: dict[str, Module]) -> tuple[int, int]:
    """Press the button once; return (low, high) pulse counts, the button's own pulse excluded."""
    low = high = 0
    for pulse in _press(broadcaster, modules):
        if pulse.signal is Signal.LOW:
            low += 1
        elif pulse.signal is Signal.HIGH:
            high += 1
    return low, high


def propagate_until_high(
    broadcaster: list[str], modules: dict[str, Module], nodes: list[str]
) -> dict[str, int]:
    """Press repeatedly until each of ``nodes`` has sent a high pulse; return the press numbers."""
    first_high = {node: 0 for node in nodes}
    if not first_high:
        return first_high
    for press in count(1):
        for pulse in _press(broadcaster, modules):
            if pulse.signal is Signal.HIGH and pulse.sender in first_high:
                if first_high[pulse.sender] == 0:
                    first_high[pulse.sender] = press
                if all(first_high.values()):
                    return first_high
    return first_high


def find_dependencies(node: str, modules: dict[str, Module]) -> list[str]:
    """Names of the modules that send to ``node``."""
    return [module.name for module in modules.values() if node in module.targets]


def pulse_propagation_part1(lines: list[str]) -> int:
    """Product of low and high pulse totals over 1000 button presses."""
    broadcaster, modules = parse_modules(lines)
    total_low = total_high = 0
    for _ in range(_PRESSES):
        low, high = propagate_counting(broadcaster, modules)
        total_low += low + 1
        total_high += high
    return total_low * total_high


def pulse_propagation_part2(lines: list[str]) -> int:
    """Fewest presses before 'rx' receives a low pulse, via cycle lengths of its feeders."""
    broadcaster, modules = parse_modules(lines)
    feeders = find_dependencies("rx", modules)
    if not feeders:
        raise ValueError("no module sends to rx")
    dependencies = find_dependencies(feeders[0], modules)
    return lcm(propagate_until_high(broadcaster, modules, dependencies).values())