"""
Tests for validation module.

Tests leg validation functions and custom exceptions.
"""

import pytest

from src.itinerary.exceptions import (
    AmbiguousDestinationError,
    AmbiguousSourceError,
    CycleDetectedError,
    DestinationNotFoundError,
    DestinationNotFoundForError,
    DisconnectedLegsError,
    EndpointError,
    InvalidAirportCodeError,
    InvalidLegError,
    ItineraryError,
    LegValidationError,
    PathError,
    SourceNotFoundError,
)
from src.itinerary.validation import (
    LEG_SIZE,
    validate_airport_code,
    validate_leg,
    validate_leg_shape,
)


# -------------------------
# Exception hierarchy tests
# -------------------------


class TestExceptionHierarchy:
    """Tests for exception class hierarchy."""

    @pytest.mark.parametrize(
        "error_cls",
        [LegValidationError, EndpointError, PathError],
    )
    def test_category_is_itinerary_error(self, error_cls) -> None:
        assert issubclass(error_cls, ItineraryError)

    @pytest.mark.parametrize(
        "error_cls, parent",
        [
            (InvalidLegError, LegValidationError),
            (InvalidAirportCodeError, LegValidationError),
            (SourceNotFoundError, EndpointError),
            (DestinationNotFoundError, EndpointError),
            (AmbiguousSourceError, EndpointError),
            (AmbiguousDestinationError, EndpointError),
            (DestinationNotFoundForError, PathError),
            (DisconnectedLegsError, PathError),
            (CycleDetectedError, PathError),
        ],
    )
    def test_leaf_errors_have_expected_parent(self, error_cls, parent) -> None:
        assert issubclass(error_cls, parent)

    def test_kinds_are_unique(self) -> None:
        """Each leaf error exposes a distinct kind for clients."""
        kinds = {
            InvalidLegError.kind,
            InvalidAirportCodeError.kind,
            SourceNotFoundError.kind,
            DestinationNotFoundError.kind,
            AmbiguousSourceError.kind,
            AmbiguousDestinationError.kind,
            DestinationNotFoundForError.kind,
            DisconnectedLegsError.kind,
            CycleDetectedError.kind,
        }
        assert len(kinds) == 9


# -------------------------
# Exception message tests
# -------------------------


class TestExceptionMessages:
    """Tests for exception error messages and payloads."""

    def test_invalid_leg_carries_leg(self) -> None:
        error = InvalidLegError(("SFO", "EWR", "IND"))
        assert error.leg == ["SFO", "EWR", "IND"]
        assert "SFO" in str(error)
        assert "3" in str(error)

    def test_invalid_airport_code_carries_code(self) -> None:
        error = InvalidAirportCodeError("")
        assert error.code == ""
        assert "''" in str(error)

    def test_source_not_found_message(self) -> None:
        assert "source" in str(SourceNotFoundError()).lower()

    def test_destination_not_found_message(self) -> None:
        assert "destination" in str(DestinationNotFoundError()).lower()

    def test_ambiguous_errors_sort_candidates(self) -> None:
        error = AmbiguousSourceError({"ORD", "ATL"})
        assert error.candidates == ("ATL", "ORD")
        assert "ATL, ORD" in str(error)

        error = AmbiguousDestinationError(["LAX", "JFK"])
        assert error.candidates == ("JFK", "LAX")

    def test_destination_not_found_for_names_code(self) -> None:
        error = DestinationNotFoundForError("EWR")
        assert error.code == "EWR"
        assert "EWR" in str(error)

    def test_disconnected_legs_counts_and_codes(self) -> None:
        error = DisconnectedLegsError(2, 3, {"D", "C"})
        assert (error.unused, error.total, error.codes) == (2, 3, ("C", "D"))
        assert "2 of 3" in str(error)
        assert "C, D" in str(error)

    def test_disconnected_legs_without_codes(self) -> None:
        error = DisconnectedLegsError(1, 2)
        assert error.codes == ()
        assert "departing" not in str(error)

    def test_cycle_detected_names_code(self) -> None:
        error = CycleDetectedError("BOS")
        assert error.code == "BOS"
        assert "BOS" in str(error)


# -------------------------
# Validation function tests
# -------------------------


class TestValidateLegShape:
    """Tests for validate_leg_shape function."""

    def test_pair_passes(self) -> None:
        assert validate_leg_shape(["SFO", "EWR"]) == ("SFO", "EWR")

    def test_leg_size_is_two(self) -> None:
        assert LEG_SIZE == 2

    @pytest.mark.parametrize(
        "leg",
        [[], ["SFO"], ["SFO", "EWR", "IND"]],
    )
    def test_wrong_size_raises(self, leg) -> None:
        with pytest.raises(InvalidLegError) as exc_info:
            validate_leg_shape(leg)
        assert exc_info.value.leg == leg


class TestValidateAirportCode:
    """Tests for validate_airport_code function."""

    def test_non_empty_code_passes(self) -> None:
        validate_airport_code("SFO")

    def test_empty_code_raises(self) -> None:
        with pytest.raises(InvalidAirportCodeError) as exc_info:
            validate_airport_code("")
        assert exc_info.value.code == ""


class TestValidateLeg:
    """Tests for the combined validate_leg entry point."""

    def test_valid_leg_returns_pair(self) -> None:
        assert validate_leg(["SFO", "EWR"]) == ("SFO", "EWR")

    def test_empty_origin_raises(self) -> None:
        with pytest.raises(InvalidAirportCodeError):
            validate_leg(["", "EWR"])

    def test_empty_destination_raises(self) -> None:
        with pytest.raises(InvalidAirportCodeError):
            validate_leg(["SFO", ""])

    def test_shape_checked_before_codes(self) -> None:
        """A three-code leg with an empty code is an InvalidLeg, not an InvalidAirportCode."""
        with pytest.raises(InvalidLegError):
            validate_leg(["", "EWR", "IND"])
