"""If You Give A Seed A Fertilizer: chained range mappings."""

from __future__ import annotations

import sys
from collections.abc import Iterator
from dataclasses import dataclass


@dataclass(frozen=True)
class Range:
    start: int
    end: int

    def offset(self, offset: int) -> Range:
        """The same range shifted by ``offset``."""
        return Range(self.start + offset, self.end + offset)


@dataclass(frozen=True)
class AlmanacMap:
    destination: Range
    source: Range


@dataclass(frozen=True)
class Almanac:
    seeds: list[int]
    seed_to_soil: list[AlmanacMap]
    soil_to_fertilizer: list[AlmanacMap]
    fertilizer_to_water: list[AlmanacMap]
    water_to_light: list[AlmanacMap]
    light_to_temperature: list[AlmanacMap]
    temperature_to_humidity: list[AlmanacMap]
    humidity_to_location: list[AlmanacMap]

    @property
    def stages(self) -> tuple[list[AlmanacMap], ...]:
        """All mapping stages, from seed to location."""
        return (
            self.seed_to_soil,
            self.soil_to_fertilizer,
            self.fertilizer_to_water,
            self.water_to_light,
            self.light_to_temperature,
            self.temperature_to_humidity,
            self.humidity_to_location,
        )


_SECTIONS = 8


def _blocks(lines: list[str]) -> Iterator[list[str]]:
    block: list[str] = []
    for line in lines:
        if line:
            block.append(line)
        elif block:
            yield block
            block = []
    if block:
        yield block


def _parse_mappings(lines: list[str]) -> list[AlmanacMap]:
    mappings = []
    for line in lines:
        destination, source, length = (int(field) for field in line.split()[:3])
        mappings.append(
            AlmanacMap(
                destination=Range(destination, destination + length),
                source=Range(source, source + length),
            )
        )
    return sorted(mappings, key=lambda mapping: mapping.source.start)


def parse_almanac(lines: list[str]) -> Almanac:
    """Parse the seed list followed by the seven mapping sections."""
    blocks = list(_blocks(lines))
    if len(blocks) != _SECTIONS:
        raise ValueError(f"expected {_SECTIONS} sections, found {len(blocks)}")
    seeds_line, *_ = blocks[0]
    if ":" not in seeds_line:
        raise ValueError("missing seeds header")
    seeds = [int(field) for field in seeds_line.split(":")[1].split()]
    stages = [_parse_mappings(block[1:]) for block in blocks[1:]]
    return Almanac(seeds, *stages)


def intersection(first: Range, second: Range) -> Range | None:
    """The overlap of two ranges, or None if they are apart."""
    if first.start > second.end or second.start > first.end:
        return None
    return Range(max(first.start, second.start), min(first.end, second.end))


def subtract(source: Range, ranges: list[Range]) -> list[Range]:
    """The parts of ``source`` not covered by any of ``ranges``."""
    remaining = [source]
    for cut in ranges:
        pieces = []
        for current in remaining:
            if cut.end <= current.start or cut.start >= current.end:
                pieces.append(current)
                continue
            if cut.start > current.start:
                pieces.append(Range(current.start, cut.start))
            if cut.end < current.end:
                pieces.append(Range(cut.end, current.end))
        remaining = pieces
    return remaining


def lookup(key: int, mappings: list[AlmanacMap]) -> int:
    """Map a single value; unmapped values map to themselves."""
    for mapping in mappings:
        if mapping.source.start <= key < mapping.source.end:
            return mapping.destination.start + (key - mapping.source.start)
    return key


def map_ranges(ranges: list[Range], mappings: list[AlmanacMap]) -> list[Range]:
    """Map whole ranges through one stage, splitting them where needed."""
    mapped: list[Range] = []
    for current in ranges:
        covered = []
        for mapping in mappings:
            overlap = intersection(current, mapping.source)
            if overlap is not None:
                mapped.append(overlap.offset(mapping.destination.start - mapping.source.start))
                covered.append(overlap)
        mapped.extend(subtract(current, covered))
    return mapped


def _as_ranges(seeds: list[int]) -> list[Range]:
    return [Range(start, start + length) for start, length in zip(seeds[::2], seeds[1::2])]


def almanac_part1(lines: list[str]) -> int:
    """Lowest location reached by any individual seed."""
    almanac = parse_almanac(lines)

    def locate(seed: int) -> int:
        for stage in almanac.stages:
            seed = lookup(seed, stage)
        return seed

    return min((locate(seed) for seed in almanac.seeds), default=sys.maxsize)


def almanac_part2(lines: list[str]) -> int:
    """Lowest location reached when seeds are read as (start, length) pairs."""
    almanac = parse_almanac(lines)
    ranges = _as_ranges(almanac.seeds)
    for stage in almanac.stages:
        ranges = map_ranges(ranges, stage)
    return min((r.start for r in ranges), default=sys.maxsize)