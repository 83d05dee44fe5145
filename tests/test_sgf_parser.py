"""
Unit tests for the SGF parser.

Covers the main-line extraction, value escaping, variation skipping,
metadata projection and the syntax errors raised for malformed input.
"""

import logging

import pytest

from goban.errors import OutOfRangeError, SGFSyntaxError
from goban.game_record import GameInfo, GameRecord, SGFMove
from goban.loaders import SGFParser, extract_game, parse


@pytest.fixture
def parser():
    return SGFParser()


class TestBasicParsing:
    """Test parsing of simple, well-formed records."""

    def test_simple_game(self):
        record = parse("(;GM[1]SZ[9]PB[Alice]PW[Bob];B[ee];W[ge])")
        assert record.game_info.board_size == 9
        assert record.game_info.player_black == "Alice"
        assert record.game_info.player_white == "Bob"
        assert record.moves == (
            SGFMove(color="B", position="ee", move_number=1),
            SGFMove(color="W", position="ge", move_number=2),
        )

    def test_default_size(self):
        """Test that a record without SZ is a 19x19 game."""
        record = parse("(;B[pd])")
        assert record.game_info.board_size == 19
        assert record.game_info.player_black is None

    def test_empty_tree(self):
        assert parse("()") == GameRecord()

    def test_whitespace_everywhere(self):
        """Test that whitespace between tokens is ignored."""
        record = parse("\n ( ; SZ [9] \n ; B [ee] ;\tW\n[ge] ) \n")
        assert record.game_info.board_size == 9
        assert [move.position for move in record.moves] == ["ee", "ge"]

    def test_passes(self):
        """Test that empty and "tt" values are kept as pass moves."""
        record = parse("(;SZ[19];B[];W[tt])")
        assert [move.is_pass for move in record.moves] == [True, True]
        assert [move.sign for move in record.moves] == [1, -1]

    def test_node_with_both_colors(self):
        """Test that B is numbered before W when a node holds both."""
        record = parse("(;SZ[9];W[cc]B[dd];B[ee])")
        assert [(m.color, m.position, m.move_number) for m in record.moves] == [
            ("B", "dd", 1),
            ("W", "cc", 2),
            ("B", "ee", 3),
        ]

    def test_unknown_properties_ignored(self):
        record = parse("(;SZ[9]XX[foo]C[comment];B[ee]LB[ee:A])")
        assert len(record.moves) == 1
        assert record.game_info == GameInfo(board_size=9)

    def test_parser_reuse(self, parser):
        """Test that each parse call starts from a fresh scan."""
        first = parser.parse("(;SZ[9];B[aa])")
        second = parser.parse("(;SZ[13];W[bb])")
        assert first.moves[0].position == "aa"
        assert second.game_info.board_size == 13
        assert second.moves == (SGFMove(color="W", position="bb", move_number=1),)


class TestPropertyValues:
    """Test value escaping and identifier handling."""

    def test_escaped_bracket(self, parser):
        nodes = parser.parse_nodes(r"(;C[a \] b]GN[x\\y])")
        assert nodes == [{"C": ["a ] b"], "GN": ["x\\y"]}]

    def test_multiple_values(self, parser):
        nodes = parser.parse_nodes("(;AB[aa][bb] [cc])")
        assert nodes == [{"AB": ["aa", "bb", "cc"]}]

    def test_duplicate_property_values_are_merged(self, parser):
        nodes = parser.parse_nodes("(;AB[aa]AB[bb])")
        assert nodes == [{"AB": ["aa", "bb"]}]

    def test_ff3_identifiers(self):
        """Test that lowercase letters are dropped from property identifiers."""
        record = parse("(;SiZe[9]PlayerBlack[Alice];AddBlack[aa];Black[ee])")
        assert record.game_info.board_size == 9
        assert record.setup_black == ((0, 0),)
        assert record.moves[0].position == "ee"

    def test_bracket_inside_comment_does_not_end_tree(self):
        record = parse("(;SZ[9]C[look: (this) ; B];B[ee])")
        assert [move.position for move in record.moves] == ["ee"]


class TestVariations:
    """Test that only the main line is read."""

    def test_variations_skipped(self):
        record = parse("(;SZ[9];B[aa](;W[bb];B[cc])(;W[dd]);W[ee])")
        assert [move.position for move in record.moves] == ["aa", "ee"]
        assert [move.move_number for move in record.moves] == [1, 2]

    def test_nested_variations_skipped(self):
        record = parse("(;SZ[9];B[aa](;W[bb](;B[cc])(;B[dd]));W[ee])")
        assert [move.position for move in record.moves] == ["aa", "ee"]

    def test_parenthesis_inside_variation_comment(self):
        """Test that ')' inside a value does not close the variation."""
        record = parse("(;SZ[9];B[aa](;W[bb]C[:)]);W[ee])")
        assert [move.position for move in record.moves] == ["aa", "ee"]


class TestMetadata:
    """Test projection of root properties into GameInfo."""

    def test_full_header(self):
        record = parse(
            "(;GM[1]FF[4]SZ[19]PB[Lee Sedol]PW[AlphaGo]KM[7.5]HA[0]"
            "RE[W+R]DT[2016-03-09]EV[Google DeepMind Challenge Match]RO[1]"
            "GN[Game 1]RU[Chinese])"
        )
        assert record.game_info == GameInfo(
            board_size=19,
            player_black="Lee Sedol",
            player_white="AlphaGo",
            result="W+R",
            date="2016-03-09",
            event="Google DeepMind Challenge Match",
            round="1",
            komi=7.5,
            handicap=0,
            game_name="Game 1",
            rules="Chinese",
        )

    def test_rectangular_size_uses_leading_number(self):
        assert parse("(;SZ[13:9])").game_info.board_size == 13

    def test_bad_komi_logged_and_ignored(self, caplog):
        with caplog.at_level(logging.WARNING, logger="goban.loaders.sgf_parser"):
            record = parse("(;KM[six and a half])")
        assert record.game_info.komi is None
        assert "KM" in caplog.text

    def test_bad_size_keeps_default(self, caplog):
        with caplog.at_level(logging.WARNING):
            record = parse("(;SZ[big])")
        assert record.game_info.board_size == 19
        assert "SZ" in caplog.text

    def test_metadata_from_later_node(self):
        record = parse("(;SZ[9];B[aa]RE[B+1.5])")
        assert record.game_info.result == "B+1.5"


class TestSetupStones:
    """Test AB/AW extraction."""

    def test_setup_points_and_rectangles(self):
        record = parse("(;SZ[9]AB[cc][gg]AW[aa:ba])")
        assert record.setup_black == ((2, 2), (6, 6))
        assert record.setup_white == ((0, 0), (1, 0))

    def test_setup_after_first_move_ignored(self):
        record = parse("(;SZ[9]AB[cc];B[ee];AW[aa])")
        assert record.setup_black == ((2, 2),)
        assert record.setup_white == ()

    def test_setup_uses_final_board_size(self):
        """Test that setup points are checked against SZ even when SZ follows them."""
        record = parse("(;AB[uu]SZ[21])")
        assert record.setup_black == ((20, 20),)

    def test_setup_out_of_range(self):
        with pytest.raises(OutOfRangeError):
            parse("(;SZ[9]AB[jj])")


class TestSyntaxErrors:
    """Test rejection of malformed SGF text."""

    @pytest.mark.parametrize("text", ["", "   ", ";B[aa]", "B[aa])"])
    def test_missing_open_paren(self, text):
        with pytest.raises(SGFSyntaxError, match="must start with"):
            parse(text)

    def test_unterminated_value(self):
        with pytest.raises(SGFSyntaxError, match="closing ']'"):
            parse("(;SZ[9];B[ee")

    def test_unterminated_tree(self):
        with pytest.raises(SGFSyntaxError, match="closing '\\)'"):
            parse("(;SZ[9];B[ee]")

    def test_unterminated_variation(self):
        with pytest.raises(SGFSyntaxError, match="Variation"):
            parse("(;SZ[9];B[ee](;W[aa]")

    def test_property_without_value(self):
        with pytest.raises(SGFSyntaxError, match="has no value"):
            parse("(;SZ;B[ee])")


class TestExtractGame:
    """Test extract_game on hand-built node lists."""

    def test_empty_node_list(self):
        assert extract_game([]) == GameRecord()

    def test_nodes(self):
        record = extract_game([{"SZ": ["9"], "HA": ["2"]}, {"B": ["ee"]}, {"W": ["tt"]}])
        assert record.game_info.handicap == 2
        assert len(record.moves) == 2
        assert record.moves[1].is_pass
