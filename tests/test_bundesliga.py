import pytest

from katabox.bundesliga import Bundesliga

SAMPLE = [
    "6:0 FC Bayern Muenchen - Werder Bremen",
    "-:- Eintracht Frankfurt - Schalke 04",
    "-:- FC Augsburg - VfL Wolfsburg",
    "-:- Hamburger SV - FC Ingolstadt",
    "-:- 1. FC Koeln - SV Darmstadt",
    "-:- Borussia Dortmund - FSV Mainz 05",
    "-:- Borussia Moenchengladbach - Bayer Leverkusen",
    "-:- Hertha BSC Berlin - SC Freiburg",
    "-:- TSG 1899 Hoffenheim - RasenBall Leipzig",
]


def _lines(results):
    return Bundesliga().table(results).split("\n")


def _name(line, width):
    return line[width + 2:width + 32].rstrip()


def test_sample_has_one_line_per_team():
    lines = _lines(SAMPLE)
    teams = set()
    for result in SAMPLE:
        home, away = result[4:].split(" - ")
        teams.update({home, away})
    assert len(lines) == len(teams)
    assert {_name(line, 2) for line in lines} == teams


def test_sample_winner_line():
    lines = _lines(SAMPLE)
    assert lines[0] == f" 1. {'FC Bayern Muenchen':<30}1  1  0  0  6:0  3"


def test_sample_loser_line():
    lines = _lines(SAMPLE)
    assert lines[-1] == f"18. {'Werder Bremen':<30}1  0  0  1  0:6  0"


def test_names_starting_with_one_come_first_among_equals():
    lines = _lines(SAMPLE)
    assert _name(lines[1], 2) == "1. FC Koeln"
    assert lines[1].startswith(" 2. ")


def test_unplayed_teams_share_position_and_are_sorted():
    lines = _lines(SAMPLE)
    middle = lines[1:-1]
    assert all(line.startswith(" 2. ") for line in middle)
    assert all(line.endswith("0  0  0  0  0:0  0") for line in middle)
    names = [_name(line, 2) for line in middle[1:]]
    assert names == sorted(names, key=str.lower)


def test_draw_shares_position():
    lines = _lines(["1:1 Alpha - Beta"])
    assert [line[:3] for line in lines] == ["1. ", "1. "]
    assert [_name(line, 1) for line in lines] == ["Alpha", "Beta"]
    assert all(line.endswith("1:1  1") for line in lines)


def test_goal_difference_breaks_point_ties():
    lines = _lines(["1:0 Cee - Dee", "3:0 Aye - Bee"])
    names = [_name(line, 1) for line in lines]
    assert names.index("Aye") < names.index("Cee")
    assert names.index("Cee") < names.index("Dee")
    assert names.index("Dee") < names.index("Bee")


def test_results_accumulate_across_calls():
    league = Bundesliga()
    league.table(["2:0 Aye - Bee"])
    lines = league.table(["0:0 Aye - Bee"]).split("\n")
    by_name = {_name(line, 1): line.split() for line in lines}
    assert by_name["Aye"][-2] == "2:0"
    assert by_name["Bee"][-2] == "0:2"
    assert int(by_name["Aye"][-1]) > int(by_name["Bee"][-1])
    assert by_name["Aye"][2] == by_name["Bee"][2] == "2"


def test_empty_results_give_empty_table():
    assert Bundesliga().table([]) == ""


def test_malformed_result_raises():
    with pytest.raises(ValueError):
        Bundesliga().table(["no score here"])