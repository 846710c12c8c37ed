import pytest

from aoc2023.day05 import (
    Almanac,
    AlmanacMap,
    Range,
    almanac_part1,
    almanac_part2,
    intersection,
    lookup,
    map_ranges,
    parse_almanac,
    subtract,
)

EXAMPLE = [
    "seeds: 79 14 55 13",
    "",
    "seed-to-soil map:",
    "50 98 2",
    "52 50 48",
    "",
    "soil-to-fertilizer map:",
    "0 15 37",
    "37 52 2",
    "39 0 15",
    "",
    "fertilizer-to-water map:",
    "49 53 8",
    "0 11 42",
    "42 0 7",
    "57 7 4",
    "",
    "water-to-light map:",
    "88 18 7",
    "18 25 70",
    "",
    "light-to-temperature map:",
    "45 77 23",
    "81 45 19",
    "68 64 13",
    "",
    "temperature-to-humidity map:",
    "0 69 1",
    "1 0 69",
    "",
    "humidity-to-location map:",
    "60 56 37",
    "56 93 4",
]


def m(dest_start, dest_end, src_start, src_end):
    return AlmanacMap(destination=Range(dest_start, dest_end), source=Range(src_start, src_end))


def test_parse_almanac():
    assert parse_almanac(EXAMPLE) == Almanac(
        seeds=[79, 14, 55, 13],
        seed_to_soil=[m(52, 100, 50, 98), m(50, 52, 98, 100)],
        soil_to_fertilizer=[m(39, 54, 0, 15), m(0, 37, 15, 52), m(37, 39, 52, 54)],
        fertilizer_to_water=[
            m(42, 49, 0, 7),
            m(57, 61, 7, 11),
            m(0, 42, 11, 53),
            m(49, 57, 53, 61),
        ],
        water_to_light=[m(88, 95, 18, 25), m(18, 88, 25, 95)],
        light_to_temperature=[m(81, 100, 45, 64), m(68, 81, 64, 77), m(45, 68, 77, 100)],
        temperature_to_humidity=[m(1, 70, 0, 69), m(0, 1, 69, 70)],
        humidity_to_location=[m(60, 97, 56, 93), m(56, 60, 93, 97)],
    )


def test_parse_almanac_rejects_missing_sections():
    with pytest.raises(ValueError):
        parse_almanac(EXAMPLE[:10])


def test_almanac_part1():
    assert almanac_part1(EXAMPLE) == 35


def test_almanac_part2():
    assert almanac_part2(EXAMPLE) == 46


@pytest.mark.parametrize(
    ("source", "ranges", "expected"),
    [
        (Range(1, 5), [Range(7, 10)], [Range(1, 5)]),
        (Range(1, 10), [Range(7, 15)], [Range(1, 7)]),
        (Range(1, 10), [Range(3, 7)], [Range(1, 3), Range(7, 10)]),
    ],
)
def test_subtract(source, ranges, expected):
    assert subtract(source, ranges) == expected


def test_range_offset():
    assert Range(1, 5).offset(3) == Range(4, 8)


def test_intersection_apart_is_none():
    assert intersection(Range(1, 5), Range(7, 10)) is None


def test_intersection_overlap():
    assert intersection(Range(1, 10), Range(7, 15)) == Range(7, 10)


def test_lookup_mapped_and_unmapped():
    seed_to_soil = parse_almanac(EXAMPLE).seed_to_soil
    assert lookup(79, seed_to_soil) == 81
    assert lookup(10, seed_to_soil) == 10


def test_map_ranges_without_mappings_is_identity():
    ranges = [Range(3, 9), Range(20, 25)]
    assert map_ranges(ranges, []) == ranges


def test_map_ranges_agrees_with_lookup():
    seed_to_soil = parse_almanac(EXAMPLE).seed_to_soil
    mapped = map_ranges([Range(79, 93)], seed_to_soil)
    starts = {r.start for r in mapped if r.start < r.end}
    assert lookup(79, seed_to_soil) in starts