"""Tests for reservation operations in the query service."""
from datetime import date

from src.db.database import ReservationDB
from src.models.reservation import ReservationPayload
from src.services import reservation_service
from src.services.results import ErrorKind


def book(db, campsite_id, checkin, checkout, user_profile_id=1):
    payload = ReservationPayload(
        campsite_id=campsite_id,
        user_profile_id=user_profile_id,
        checkin_date=checkin,
        checkout_date=checkout,
    )
    return reservation_service.create_reservation(db, payload)


class TestListReservations:
    def test_seed_reservation_is_fully_populated(self, db):
        reservations = reservation_service.list_reservations(db).value

        assert len(reservations) == 1
        only = reservations[0]
        assert only.campsite.nickname == "Barred Owl"
        assert only.campsite.campsite_type.campsite_type_name == "Tent"
        assert only.user_profile.email == "john.doe@example.com"
        assert (only.checkin_date, only.checkout_date) == (date(2025, 1, 2), date(2025, 1, 7))

    def test_sorted_by_checkin_regardless_of_insert_order(self, db):
        book(db, 4, date(2025, 8, 10), date(2025, 8, 12))
        book(db, 2, date(2024, 12, 1), date(2024, 12, 5))
        book(db, 3, date(2025, 3, 15), date(2025, 3, 16))

        checkins = [r.checkin_date for r in reservation_service.list_reservations(db).value]

        assert checkins == [date(2024, 12, 1), date(2025, 1, 2), date(2025, 3, 15), date(2025, 8, 10)]

    def test_nested_entities_carry_no_back_reference(self, db):
        book(db, 2, date(2025, 5, 1), date(2025, 5, 4))

        for reservation in reservation_service.list_reservations(db).value:
            tree = reservation.model_dump(by_alias=True)
            assert set(tree["userProfile"]) == {"id", "firstName", "lastName", "email"}
            assert set(tree["campsite"]) == {"id", "nickname", "campsiteTypeId", "imageUrl", "campsiteType"}
            assert set(tree["campsite"]["campsiteType"]) == {
                "id", "campsiteTypeName", "feePerNight", "maxReservationDays",
            }


class TestCreateReservation:
    def test_create_assigns_identity(self, db):
        result = book(db, 5, date(2025, 6, 1), date(2025, 6, 3))

        assert result.ok
        assert result.value.id == 2
        assert reservation_service.get_reservation(db, 2).value.campsite.nickname == "Mighty Duck"

    def test_business_rules_are_not_enforced(self, db):
        # Overlaps the seed stay, runs backwards, and exceeds the Tent limit
        assert book(db, 1, date(2025, 1, 3), date(2025, 1, 1)).ok
        assert book(db, 1, date(2025, 1, 1), date(2025, 3, 1)).ok

    def test_unknown_campsite_is_a_validation_error(self, db):
        result = book(db, 999, date(2025, 6, 1), date(2025, 6, 3))

        assert result.error == ErrorKind.VALIDATION
        assert result.message == "The data submitted is invalid."
        assert db.query(ReservationDB).count() == 1

    def test_unknown_user_profile_is_a_validation_error(self, db):
        result = book(db, 2, date(2025, 6, 1), date(2025, 6, 3), user_profile_id=8)
        assert result.error == ErrorKind.VALIDATION


class TestDeleteReservation:
    def test_delete_then_list_is_empty(self, db):
        assert reservation_service.delete_reservation(db, 1).ok
        assert reservation_service.list_reservations(db).value == []

    def test_delete_missing_reservation_is_not_found(self, db):
        result = reservation_service.delete_reservation(db, 2)

        assert result.error == ErrorKind.NOT_FOUND
        assert result.message == "Reservation was not found."
        assert db.query(ReservationDB).count() == 1

    def test_get_missing_reservation_is_not_found(self, db):
        assert reservation_service.get_reservation(db, 12).error == ErrorKind.NOT_FOUND


class TestOutOfRangeIds:
    def test_create_with_out_of_range_campsite_is_a_validation_error(self, db):
        result = book(db, 2 ** 70, date(2025, 6, 1), date(2025, 6, 3))

        assert result.error == ErrorKind.VALIDATION
        assert db.query(ReservationDB).count() == 1

    def test_get_and_delete_are_not_found(self, db):
        assert reservation_service.get_reservation(db, 2 ** 70).error == ErrorKind.NOT_FOUND
        assert reservation_service.delete_reservation(db, 2 ** 70).error == ErrorKind.NOT_FOUND


class TestStorageFailures:
    def test_failed_insert_is_a_persistence_error(self, failing_commit):
        result = book(failing_commit, 2, date(2025, 6, 1), date(2025, 6, 3))

        assert result.error == ErrorKind.PERSISTENCE
        assert result.message == "An error occurred while trying to save the reservation."
        assert failing_commit.query(ReservationDB).count() == 1

    def test_failed_delete_keeps_the_reservation(self, failing_commit):
        result = reservation_service.delete_reservation(failing_commit, 1)

        assert result.error == ErrorKind.PERSISTENCE
        assert len(reservation_service.list_reservations(failing_commit).value) == 1

    def test_reads_on_missing_table_are_persistence_errors(self, db, drop_tables):
        drop_tables("reservations")

        listed = reservation_service.list_reservations(db)
        assert listed.error == ErrorKind.PERSISTENCE
        assert listed.message == "An error occurred while trying to load reservations."
        assert reservation_service.get_reservation(db, 1).error == ErrorKind.PERSISTENCE
        assert reservation_service.delete_reservation(db, 1).error == ErrorKind.PERSISTENCE
