"""
Unit tests for the resolver module.

Covers:
  • parse_signature / Signature helpers
  • TextResolver instance and type-level lookups
  • NullResolver
  • get_resolver factory
"""

import pytest

from lexicon.exceptions import UnresolvedSignatureError
from lexicon.resolver.base import NullResolver
from lexicon.resolver.factory import get_resolver
from lexicon.resolver.models import Signature, SourceLocation, parse_signature
from lexicon.resolver.text_resolver import TextResolver
from lexicon.store.models import ScriptRecord


# ── Fixtures ──────────────────────────────────────────────────────────────────

GAME_ACTOR = """\
#==============================================================================
# ** Game_Actor
#==============================================================================
class Game_Actor < Game_Battler
  def initialize(actor_id)
    super()
  end
  def level_up
    @level += 1
  end
  def self.max_level
    99
  end
end
"""

SES_CORE = """\
module SES
  module Lexicon
    def self.named(name)
    end
  end
  class Other
    def named
    end
  end
end
"""

TWO_CLASSES = """\
class Window_A
  def refresh
  end
end
class Window_B
  def draw_item(index)
  end
end
"""


@pytest.fixture
def records() -> list[ScriptRecord]:
    return [
        ScriptRecord(name="Game_Actor", code=GAME_ACTOR, source_id=10),
        ScriptRecord(name="SES Core",   code=SES_CORE,   source_id=20),
        ScriptRecord(name="Windows",    code=TWO_CLASSES, source_id=30),
    ]


@pytest.fixture
def resolver(records) -> TextResolver:
    return TextResolver(records)


# ── parse_signature ───────────────────────────────────────────────────────────

class TestParseSignature:

    def test_instance_signature(self):
        assert parse_signature("Game_Actor#level_up") == Signature("Game_Actor", "level_up", True)

    def test_type_level_signature(self):
        assert parse_signature("Game_Actor.max_level") == Signature("Game_Actor", "max_level", False)

    def test_namespaced_owner(self):
        sig = parse_signature("SES::Lexicon.named")
        assert sig.owner == "SES::Lexicon"
        assert sig.owner_name == "Lexicon"

    def test_predicate_and_bang_members(self):
        assert parse_signature("Game_Battler#dead?").member == "dead?"
        assert parse_signature("Game_Battler#clear_states!").member == "clear_states!"

    def test_str_round_trips_separator(self):
        assert str(parse_signature("A#b")) == "A#b"
        assert str(parse_signature("A.b")) == "A.b"

    @pytest.mark.parametrize("text", ["", "Game_Actor", "#level_up", "Game Actor#x", "A#b#c"])
    def test_malformed_raises(self, text):
        with pytest.raises(UnresolvedSignatureError):
            parse_signature(text)


# ── TextResolver ──────────────────────────────────────────────────────────────

class TestTextResolver:

    def test_kind(self, resolver):
        assert resolver.kind == "text"

    def test_instance_method_line_is_one_based(self, resolver):
        loc = resolver.resolve(parse_signature("Game_Actor#level_up"))
        assert loc == SourceLocation(source_id=10, line_number=8)

    def test_type_level_method(self, resolver):
        loc = resolver.resolve(parse_signature("Game_Actor.max_level"))
        assert loc == SourceLocation(source_id=10, line_number=11)

    def test_instance_lookup_ignores_self_methods(self, resolver):
        assert resolver.resolve(parse_signature("Game_Actor#max_level")) is None

    def test_namespaced_module_function(self, resolver):
        loc = resolver.resolve(parse_signature("SES::Lexicon.named"))
        assert loc == SourceLocation(source_id=20, line_number=3)

    def test_does_not_leak_into_sibling_class(self, resolver):
        # Window_A has no draw_item; the one in Window_B must not be returned
        assert resolver.resolve(parse_signature("Window_A#draw_item")) is None
        loc = resolver.resolve(parse_signature("Window_B#draw_item"))
        assert loc == SourceLocation(source_id=30, line_number=6)

    def test_prefix_of_method_name_does_not_match(self, resolver):
        assert resolver.resolve(parse_signature("Game_Actor#level")) is None

    def test_unknown_owner_returns_none(self, resolver):
        assert resolver.resolve(parse_signature("Game_Party#gold")) is None

    def test_falls_back_to_position_without_source_id(self):
        resolver = TextResolver([
            ScriptRecord(name="x", code=""),
            ScriptRecord(name="y", code="class Y\n  def z\n  end\nend"),
        ])
        assert resolver.resolve(parse_signature("Y#z")) == SourceLocation(1, 2)

    def test_reports_load_position_for_shared_source_ids(self):
        resolver = TextResolver([
            ScriptRecord(name="a", code="class A\n  def b\n  end\nend", source_id=5),
            ScriptRecord(name="c", code="class C\n  def d\n  end\nend", source_id=5),
        ])
        loc = resolver.resolve(parse_signature("C#d"))
        assert (loc.source_id, loc.line_number, loc.record_index) == (5, 2, 1)


# ── NullResolver / factory ────────────────────────────────────────────────────

class TestFactory:

    def test_null_resolver_never_resolves(self):
        assert NullResolver().resolve(parse_signature("A#b")) is None

    def test_text_kind(self, records):
        resolver = get_resolver("text", records)
        assert isinstance(resolver, TextResolver)
        assert resolver.resolve(parse_signature("Game_Actor#level_up")) is not None

    def test_none_kind(self):
        assert isinstance(get_resolver("none"), NullResolver)

    def test_unknown_kind_raises(self):
        with pytest.raises(ValueError):
            get_resolver("ruby")
