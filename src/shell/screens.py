"""
Screen state holders for the trip forms.

Each screen owns its state values exclusively, routes user actions into the
pure component functions, and replaces its state with whatever they return.
Service calls go through ports; a failed call leaves the form state as it was.

Shell Layer - orchestrates the functional core with I/O.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date

from src.app_shell.config import AppConfig
from src.components.calendar import (
    DateRangeSelection,
    format_range,
    is_selectable,
    marked_dates,
    select_day,
)
from src.components.flow import (
    AdvanceOutput,
    FlowState,
    SubmissionState,
    TripFormSnapshot,
    advance,
    back,
    begin_submission,
    can_edit_dates,
    close_overlay,
    end_submission,
    new_flow,
    open_overlay,
    run_open_calendar,
)
from src.components.invite import AddEmailOutput, InviteSet, add_email, remove_email
from src.components.links import CreateLinkInput, LinkOperationOutput, LinksServerPort
from src.components.links import run_create as run_create_link
from src.components.trips import (
    ClockPort,
    ConfirmParticipantInput,
    CreateTripInput,
    CreateTripOutput,
    ParticipantsServerPort,
    TripOperationOutput,
    TripOverviewOutput,
    TripServerPort,
    TripStoragePort,
    UpdateTripInput,
    run_confirm_participant,
    run_create_trip,
    run_get_trip,
    run_update_trip,
)
from src.domain.entities import MarkStyle, Participant, TripDetails, TripLink, TripServiceError

logger = logging.getLogger(__name__)


@dataclass
class _DatePickerScreen:
    """Calendar state shared by the create and edit screens."""

    clock: ClockPort
    config: AppConfig = field(default_factory=AppConfig)
    selection: DateRangeSelection = field(default_factory=DateRangeSelection)
    flow: FlowState = field(default_factory=lambda: new_flow("create"))

    @property
    def dates_text(self) -> str:
        return format_range(self.selection, self.config.calendar)

    @property
    def marked_dates(self) -> dict[str, MarkStyle]:
        return marked_dates(self.selection)

    def pick_day(self, day: date) -> None:
        """Past days, and any day while the dates are locked, are ignored."""
        if not is_selectable(day, self.clock.today()):
            logger.debug("Ignoring pick of past day %s", day)
            return
        if not can_edit_dates(self.flow):
            logger.debug("Dates are locked on step %s", self.flow.step)
            return
        self.selection = select_day(self.selection, day)


@dataclass
class CreateTripScreen(_DatePickerScreen):
    """Two-step trip creation: details, then guests."""

    server: TripServerPort | None = None
    storage: TripStoragePort | None = None
    destination: str = ""
    invites: InviteSet = field(default_factory=InviteSet)
    submission: SubmissionState = field(default_factory=SubmissionState)
    trip_id: str | None = None

    def set_destination(self, text: str) -> None:
        # Place and dates are read-only on the guest step
        if self.flow.step == "details":
            self.destination = text

    def open_calendar(self) -> None:
        self.flow = run_open_calendar(self.flow)

    def confirm_dates(self) -> None:
        self.flow = close_overlay(self.flow)

    def open_guests(self) -> None:
        if self.flow.step == "invite_guests":
            self.flow = open_overlay(self.flow, "guest_picker")

    def close_overlay(self) -> None:
        self.flow = close_overlay(self.flow)

    def add_guest(self, raw_email: str) -> AddEmailOutput:
        result = add_email(self.invites, raw_email)
        self.invites = result.invites
        return result

    def remove_guest(self, email: str) -> None:
        self.invites = remove_email(self.invites, email)

    def change_place_and_date(self) -> None:
        self.flow = back(self.flow)

    def continue_(self) -> AdvanceOutput:
        result = advance(
            self.flow,
            TripFormSnapshot(destination=self.destination, selection=self.selection),
            self.config.form,
        )
        self.flow = result.state
        return result

    def submit(self) -> CreateTripOutput:
        """Create the trip; call once the user has confirmed."""
        if self.server is None:
            raise RuntimeError("CreateTripScreen has no trip server")
        if self.flow.step != "invite_guests":
            raise RuntimeError("Trip can only be submitted from the guest step")

        self.submission = begin_submission(self.submission)
        try:
            output = run_create_trip(
                CreateTripInput(
                    destination=self.destination,
                    selection=self.selection,
                    invites=self.invites,
                ),
                self.server,
                self.config.trips,
            )
        finally:
            self.submission = end_submission(self.submission)

        if output.trip_id is not None:
            self.trip_id = output.trip_id
            if self.storage is not None:
                self.storage.save(output.trip_id)
        return output


@dataclass
class EditTripScreen(_DatePickerScreen):
    """Trip page with the update form and its date picker."""

    trip_id: str = ""
    server: TripServerPort | None = None
    destination: str = ""
    flow: FlowState = field(default_factory=lambda: new_flow("edit"))
    submission: SubmissionState = field(default_factory=SubmissionState)
    trip: TripDetails | None = None
    headline: str = ""

    def _server(self) -> TripServerPort:
        if self.server is None:
            raise RuntimeError("EditTripScreen has no trip server")
        return self.server

    def load(self) -> TripOverviewOutput:
        output = run_get_trip(self.trip_id, self._server(), self.config.trips)
        if output.trip is not None:
            self.trip = output.trip
            self.destination = output.trip.destination
            self.headline = output.headline
        return output

    def set_destination(self, text: str) -> None:
        self.destination = text

    def open_update_form(self) -> None:
        self.flow = open_overlay(self.flow, "update_trip_form")

    def open_calendar(self) -> None:
        self.flow = run_open_calendar(self.flow)

    def confirm_dates(self) -> None:
        # Back to the update form the picker was opened from
        self.flow = open_overlay(self.flow, "update_trip_form")

    def close_overlay(self) -> None:
        self.flow = close_overlay(self.flow)

    def submit_update(self) -> TripOperationOutput:
        self.submission = begin_submission(self.submission)
        try:
            output = run_update_trip(
                UpdateTripInput(
                    trip_id=self.trip_id,
                    destination=self.destination,
                    selection=self.selection,
                ),
                self._server(),
            )
        finally:
            self.submission = end_submission(self.submission)

        if output.success:
            self.flow = close_overlay(self.flow)
            self.load()
        return output


@dataclass
class TripDetailsScreen:
    """Links and participants of a trip."""

    trip_id: str
    links_server: LinksServerPort
    participants_server: ParticipantsServerPort
    config: AppConfig = field(default_factory=AppConfig)
    flow: FlowState = field(default_factory=lambda: new_flow("edit"))
    submission: SubmissionState = field(default_factory=SubmissionState)
    links: list[TripLink] = field(default_factory=list)
    participants: list[Participant] = field(default_factory=list)

    def refresh(self) -> bool:
        """Reload links and participants; keeps the old lists on failure."""
        try:
            links = self.links_server.get_links_by_trip_id(self.trip_id)
            participants = self.participants_server.get_by_trip_id(self.trip_id)
        except TripServiceError as e:
            logger.warning("Could not load details of trip %s: %s", self.trip_id, e)
            return False

        self.links = links
        self.participants = participants
        return True

    def open_new_link_form(self) -> None:
        self.flow = open_overlay(self.flow, "new_link_form")

    def open_confirm_attendance(self) -> None:
        self.flow = open_overlay(self.flow, "confirm_attendance")

    def close_overlay(self) -> None:
        self.flow = close_overlay(self.flow)

    def add_link(self, title: str, url: str) -> LinkOperationOutput:
        self.submission = begin_submission(self.submission)
        try:
            output = run_create_link(
                CreateLinkInput(trip_id=self.trip_id, title=title, url=url),
                self.links_server,
                self.config.links,
            )
        finally:
            self.submission = end_submission(self.submission)

        if output.success:
            self.flow = close_overlay(self.flow)
            self.refresh()
        return output

    def confirm_attendance(
        self, participant_id: str, name: str, email: str
    ) -> TripOperationOutput:
        self.submission = begin_submission(self.submission)
        try:
            output = run_confirm_participant(
                ConfirmParticipantInput(
                    participant_id=participant_id, name=name, email=email
                ),
                self.participants_server,
            )
        finally:
            self.submission = end_submission(self.submission)

        if output.success:
            self.flow = close_overlay(self.flow)
            self.refresh()
        return output
