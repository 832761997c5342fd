"""
Integration tests for the full property suite.

Runs the canonical properties through the runner against the bundled engine
and against faulty codecs, confirming that each oracle catches the bug class
it targets and reports a usable counterexample.
"""

import logging

import pytest

from codec_harness.core.exceptions import PropertyViolation
from codec_harness.domain.alphabet import URL_SAFE
from codec_harness.domain.configuration import HarnessConfig
from codec_harness.domain.padding import PaddingPolicy
from codec_harness.properties import (
    ALL_PROPERTIES,
    character_set_compliance,
    cross_instance_consistency,
    custom_alphabet_roundtrip,
    decode_encode_roundtrip,
    encode_decode_roundtrip,
    invalid_symbol_detection,
    padding_mode_roundtrip,
)
from codec_harness.services.property_runner import PropertyRunner
from codec_harness.utilities.constants import STANDARD_SYMBOLS
from codec_harness.utilities.formatters import build_results_table
from tests.mocks.codec_mocks import (
    AlternatingFactory,
    CrashingDecoder,
    CrashingEncoder,
    HalfCustomCodec,
    LenientCodec,
    PaddingRejectingCodec,
    RecordingFactory,
    ReversingCodec,
    StandardAlphabetCodec,
    TruncatingCodec,
    UnpaddedCodec,
)

# Faults are found early; the budget only bounds the search
FAULT_BUDGET = 300

FAULTY_CODECS = [
    (encode_decode_roundtrip, TruncatingCodec),
    (decode_encode_roundtrip, ReversingCodec),
    (cross_instance_consistency, AlternatingFactory),
    (custom_alphabet_roundtrip, HalfCustomCodec),
    (padding_mode_roundtrip, UnpaddedCodec),
    (character_set_compliance, StandardAlphabetCodec),
    (invalid_symbol_detection, LenientCodec),
]


class TestSoundEngine:
    """The bundled engine passes every canonical property."""

    def test_run_all_passes(self, runner):
        """Test the whole suite passes with a small budget."""
        results = runner.run_all()
        assert len(results) == len(ALL_PROPERTIES) == 7
        failures = [str(result) for result in results if not result.success]
        assert failures == []
        assert all(result.iterations_run > 0 for result in results)

    def test_seeded_suite_passes(self, runner):
        """Test every property also passes from the seeded driver."""
        for prop in ALL_PROPERTIES:
            result = runner.run_seeded(prop, seed=2024, iterations=25)
            assert result.success, str(result)
            assert result.iterations_run == 25

    def test_results_render(self, runner):
        """Test run results feed the results table."""
        results = runner.run_all(ALL_PROPERTIES[:2])
        assert build_results_table(results).row_count == 2

    def test_factory_sees_generated_configs(self, runner_for):
        """Test configuration-driven properties build codecs for generated configs."""
        factory = RecordingFactory()
        runner_for(factory).run(cross_instance_consistency)
        assert factory.configs
        assert all(config.max_input_size == 1024 for config in factory.configs)


class TestFaultyCodecs:
    """Each oracle detects the fault it targets."""

    @pytest.mark.parametrize(
        "prop,faulty",
        FAULTY_CODECS,
        ids=[prop.name for prop, _ in FAULTY_CODECS],
    )
    def test_oracle_catches_fault(self, prop, faulty):
        """Test the runner records a failure with a counterexample."""
        factory = faulty() if faulty is AlternatingFactory else faulty
        runner = PropertyRunner(HarnessConfig(iterations=FAULT_BUDGET), factory, seed=99)
        result = runner.run(prop)
        assert not result.success
        assert result.error_message.startswith(prop.name)
        counterexample = result.counterexample
        assert counterexample is not None
        assert counterexample.property_name == prop.name
        assert counterexample.inputs
        assert prop.name in counterexample.describe()


class TestCrashingCodecs:
    """Codec crashes are property failures, not aborted runs."""

    def test_decode_crash_does_not_abort_suite(self, harness_logs):
        """Test a decoder raising IndexError fails properties without stopping siblings."""
        runner = PropertyRunner(HarnessConfig(iterations=FAULT_BUDGET), CrashingDecoder, seed=1)
        results = runner.run_all(ALL_PROPERTIES)

        assert [result.property_name for result in results] == [p.name for p in ALL_PROPERTIES]
        assert all(result.iterations_run > 0 for result in results)

        first = results[0]
        assert not first.success
        assert "IndexError" in first.error_message
        assert isinstance(first.counterexample.details["error"], IndexError)
        assert first.counterexample.inputs
        assert not any(record.levelno >= logging.ERROR for record in harness_logs.records)

    def test_decode_crash_on_invalid_symbol(self):
        """Test a crash is not mistaken for rejecting an invalid symbol."""
        with pytest.raises(PropertyViolation) as exc_info:
            invalid_symbol_detection(("AAAA@", HarnessConfig()), CrashingDecoder)
        assert "IndexError while decoding" in exc_info.value.message
        assert exc_info.value.counterexample.details["text"] == "AAAA@"

    def test_encode_failure_is_violation(self):
        """Test encoding raising any exception fails the property."""
        with pytest.raises(PropertyViolation) as exc_info:
            encode_decode_roundtrip(b"", CrashingEncoder)
        assert "ValueError while encoding" in exc_info.value.message
        assert exc_info.value.counterexample.details["data"] == b""

    def test_rejected_well_formed_string_warns(self, harness_logs):
        """Test rejecting a string with no deducible fault is logged as a warning."""
        decode_encode_roundtrip("AA==", PaddingRejectingCodec)
        warnings = [r for r in harness_logs.records if r.levelno == logging.WARNING]
        assert len(warnings) == 1
        assert "AA==" in warnings[0].getMessage()

    def test_rejected_malformed_string_is_skipped_quietly(self, harness_logs):
        """Test a rejection with a deducible cause stays at debug level."""
        decode_encode_roundtrip("AB==", PaddingRejectingCodec)
        assert not any(r.levelno >= logging.WARNING for r in harness_logs.records)


class TestKnownCounterexamples:
    """Oracles reject hand-picked failing inputs directly."""

    def test_reversing_codec(self):
        """Test decode/encode roundtrip catches reordered output."""
        with pytest.raises(AssertionError):
            decode_encode_roundtrip("AAEC", ReversingCodec)

    def test_alternating_factory(self):
        """Test cross-instance consistency catches diverging instances."""
        with pytest.raises(AssertionError):
            cross_instance_consistency((b"\x01", HarnessConfig()), AlternatingFactory())

    def test_half_custom_codec(self):
        """Test custom alphabet roundtrip catches a codec ignoring the alphabet."""
        with pytest.raises(AssertionError):
            custom_alphabet_roundtrip((b"\x00\x01\x02", STANDARD_SYMBOLS[::-1]), HalfCustomCodec)

    def test_unpadded_codec(self):
        """Test padding roundtrip catches missing pad symbols."""
        with pytest.raises(AssertionError) as exc_info:
            padding_mode_roundtrip(b"\x00", UnpaddedCodec)
        assert exc_info.value.counterexample.config.padding == PaddingPolicy.CANONICAL

    def test_standard_alphabet_codec(self):
        """Test character set compliance catches leaked standard symbols."""
        config = HarnessConfig(alphabet=URL_SAFE)
        with pytest.raises(AssertionError) as exc_info:
            character_set_compliance((b"\xff", config), StandardAlphabetCodec)
        assert exc_info.value.counterexample.details["encoded"] == "/w=="

    def test_lenient_codec(self):
        """Test invalid symbol detection catches a decoder that skips junk."""
        with pytest.raises(AssertionError) as exc_info:
            invalid_symbol_detection(("AA@==", HarnessConfig()), LenientCodec)
        assert "'@'" in exc_info.value.message

    def test_sound_engine_passes_known_inputs(self):
        """Test the same inputs pass against the bundled engine."""
        decode_encode_roundtrip("AAEC")
        cross_instance_consistency((b"\x01", HarnessConfig()))
        custom_alphabet_roundtrip((b"\x00\x01\x02", STANDARD_SYMBOLS[::-1]))
        padding_mode_roundtrip(b"\x00")
        character_set_compliance((b"\xff", HarnessConfig(alphabet=URL_SAFE)))
        invalid_symbol_detection(("AA@==", HarnessConfig()))


def test_default_budget_runner():
    """Test a runner built without arguments uses the default budget."""
    runner = PropertyRunner(seed=7)
    result = runner.run_check("budget", lambda: True)
    assert result.iterations_run == HarnessConfig().iterations
