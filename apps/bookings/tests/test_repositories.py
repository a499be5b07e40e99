from datetime import datetime, timedelta, timezone

import pytest
from django.db import IntegrityError, transaction

from apps.bookings.domain.entities import Booking as BookingEntity
from apps.bookings.domain.entities import BookingStatus
from apps.bookings.domain.exceptions import NotFoundError
from apps.bookings.models import Booking
from apps.bookings.repositories import (
    DjangoBookingRepository,
    DjangoItemRepository,
    DjangoUserRepository,
)
from apps.items.models import Item
from apps.users.models import User
from shared.domain.value_objects import Period

NOW = datetime(2030, 6, 1, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def owner():
    return User.objects.create(name="Owner", email="owner@example.com")


@pytest.fixture
def booker():
    return User.objects.create(name="Booker", email="booker@example.com")


@pytest.fixture
def item(owner):
    return Item.objects.create(owner=owner, name="Drill", description="Cordless")


@pytest.fixture
def repo():
    return DjangoBookingRepository()


def store(item, booker, start_offset, end_offset, status=Booking.Status.WAITING):
    return Booking.objects.create(
        item=item,
        booker=booker,
        start=NOW + start_offset,
        end=NOW + end_offset,
        status=status,
    )


@pytest.mark.django_db
def test_user_repository_exists(booker):
    users = DjangoUserRepository()

    assert users.exists(booker.pk)
    assert not users.exists(booker.pk + 100)


@pytest.mark.django_db
def test_item_repository_maps_entity(item, owner):
    found = DjangoItemRepository().get_by_id(item.pk)

    assert found.id == item.pk
    assert found.name == "Drill"
    assert found.owner_id == owner.pk
    assert found.available is True
    assert found.description == "Cordless"
    assert DjangoItemRepository().get_by_id(item.pk + 100) is None


@pytest.mark.django_db
def test_save_assigns_id_then_updates(repo, item, booker):
    booking = BookingEntity(
        period=Period(NOW, NOW + timedelta(hours=2)),
        item=item.to_entity(),
        booker_id=booker.pk,
    )

    saved = repo.save(booking)

    assert saved.id is not None
    row = Booking.objects.get(pk=saved.id)
    assert row.status == Booking.Status.WAITING
    assert row.item_id == item.pk

    stale = NOW - timedelta(days=30)
    Booking.objects.filter(pk=saved.id).update(updated_at=stale)

    saved.review(True)
    repo.save(saved)

    row.refresh_from_db()
    assert row.status == Booking.Status.APPROVED
    assert row.updated_at > stale
    assert Booking.objects.count() == 1


@pytest.mark.django_db
def test_save_of_deleted_booking_raises_not_found(repo, item, booker):
    row = store(item, booker, timedelta(hours=1), timedelta(hours=2))
    booking = repo.get_by_id(row.pk)
    row.delete()

    booking.review(False)
    with pytest.raises(NotFoundError):
        repo.save(booking)

    assert not Booking.objects.exists()


@pytest.mark.django_db
def test_get_by_id(repo, item, booker):
    row = store(item, booker, timedelta(hours=1), timedelta(hours=2), Booking.Status.REJECTED)

    booking = repo.get_by_id(row.pk)

    assert booking.id == row.pk
    assert booking.status is BookingStatus.REJECTED
    assert booking.period == Period(NOW + timedelta(hours=1), NOW + timedelta(hours=2))
    assert booking.item.owner_id == item.owner_id
    assert repo.get_by_id(row.pk + 100) is None


@pytest.mark.django_db
def test_find_active_by_item_id(repo, item, booker):
    current = store(item, booker, -timedelta(hours=1), timedelta(hours=1))
    store(item, booker, -timedelta(days=2), -timedelta(days=1))
    store(item, booker, timedelta(days=1), timedelta(days=2))

    active = repo.find_active_by_item_id(item.pk, NOW)

    assert [booking.id for booking in active] == [current.pk]


@pytest.mark.django_db
def test_find_all_by_booker_sorted_by_start_desc(repo, item, booker):
    other_booker = User.objects.create(name="Other", email="other@example.com")
    early = store(item, booker, timedelta(days=1), timedelta(days=2))
    late = store(item, booker, timedelta(days=5), timedelta(days=6))
    middle = store(item, booker, timedelta(days=3), timedelta(days=4))
    store(item, other_booker, timedelta(days=7), timedelta(days=8))

    bookings = repo.find_all_by_booker(booker.pk)

    assert [booking.id for booking in bookings] == [late.pk, middle.pk, early.pk]


@pytest.mark.django_db
def test_find_all_by_owner(repo, item, booker):
    stranger = User.objects.create(name="Stranger", email="stranger@example.com")
    foreign_item = Item.objects.create(owner=stranger, name="Tent")
    first = store(item, booker, timedelta(days=1), timedelta(days=2))
    second = store(item, stranger, timedelta(days=4), timedelta(days=5))
    store(foreign_item, booker, timedelta(days=3), timedelta(days=4))

    bookings = repo.find_all_by_owner(item.owner_id)

    assert [booking.id for booking in bookings] == [second.pk, first.pk]


@pytest.mark.django_db
def test_database_rejects_inverted_period(item, booker):
    with pytest.raises(IntegrityError):
        with transaction.atomic():
            store(item, booker, timedelta(hours=2), timedelta(hours=1))
