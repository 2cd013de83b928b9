from dataclasses import dataclass, field

from boardview.searcher import SearchMode, Searcher


@dataclass
class Item:
    name: str
    details: list = field(default_factory=list)

    def searchable_details(self):
        return self.details


PARTS = [Item("R101", ["10k"]), Item("C12", ["100nF"]), Item("U1", ["CPU"]), Item("r10")]
NETS = [Item("GND"), Item("PP3V3"), Item("PP5V"), Item("VGND")]


def make(mode=SearchMode.SUB, details=False):
    return Searcher(nets=NETS, parts=PARTS, mode=mode, search_details=details)


def names(items):
    return [item.name for item in items]


def test_sub_mode_is_case_insensitive():
    assert names(make().search_parts("r10")) == ["R101", "r10"]


def test_prefix_mode():
    searcher = make(SearchMode.PREFIX)
    assert names(searcher.search_nets("gnd")) == ["GND"]
    assert names(searcher.search_nets("PP")) == ["PP3V3", "PP5V"]


def test_whole_mode():
    searcher = make(SearchMode.WHOLE)
    assert names(searcher.search_parts("R10")) == ["r10"]
    assert searcher.search_parts("R1") == []


def test_empty_search_returns_nothing():
    assert make().search_parts("") == []
    assert make().search_nets("") == []


def test_limit_stops_early():
    assert names(make().search_nets("P", 1)) == ["PP3V3"]
    assert len(make().search_nets("P", -1)) == 2
    assert make().search_nets("P", 0) == []


def test_details_only_when_enabled():
    assert make().search_parts("cpu") == []
    assert names(make(details=True).search_parts("cpu")) == ["U1"]


def test_matches_modes():
    searcher = make()
    assert searcher.matches("VGND", "gnd")
    searcher.mode = SearchMode.PREFIX
    assert not searcher.matches("VGND", "gnd")
    searcher.mode = SearchMode.WHOLE
    assert searcher.matches("GND", "gnd")
    assert not searcher.matches("GNDX", "gnd")


def test_replacing_items():
    searcher = Searcher()
    assert searcher.search_parts("R") == []
    searcher.parts = PARTS
    assert names(searcher.search_parts("C1")) == ["C12"]