#!/usr/bin/env python3
"""
Seed Script
Populate demo conferences and users into a fresh engine and walk the
waitlist flow once.

Features:
1. Register Users - alice, bob and carol
2. Register Conferences - one single-seat conference plus an overlapping one
3. Walkthrough - book, cancel, offer, late confirm, confirm

Notes:
- State is in-memory; everything is gone when the script exits
- The clock is a ManualClock so the deadline can be skipped past
"""

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone

from dependency_injector import providers

from src.platform.config.di import cleanup, container, setup
from src.platform.exception.exceptions import CustomBaseError
from src.service.conference_booking.app.booking_engine import BookingEngine
from src.service.conference_booking.driven_adapter.clock.manual_clock import ManualClock


@dataclass
class ConferenceConfig:
    """Conference seed configuration"""

    name: str
    start_offset: timedelta
    duration: timedelta
    total_slots: int


TEST_USERS = ['alice', 'bob', 'carol']
TEST_CONFERENCES = [
    ConferenceConfig('PyCon', timedelta(days=1), timedelta(hours=3), 1),
    ConferenceConfig('DataConf', timedelta(days=1, hours=2), timedelta(hours=2), 2),
]


def create_users(engine: BookingEngine) -> None:
    print('👥 Registering users...')
    for user_id in TEST_USERS:
        engine.register_user(user_id=user_id, topics=['python'])
        print(f'   ✅ {user_id}')


def create_conferences(engine: BookingEngine, *, now: datetime) -> None:
    print('🗓️  Registering conferences...')
    for config in TEST_CONFERENCES:
        start_time = now + config.start_offset
        engine.register_conference(
            name=config.name,
            location='Main Hall',
            topics=['python'],
            start_time=start_time,
            end_time=start_time + config.duration,
            total_slots=config.total_slots,
        )
        print(f'   ✅ {config.name}: {config.total_slots} slot(s) from {start_time.isoformat()}')


def walkthrough(engine: BookingEngine, clock: ManualClock) -> None:
    print('🎟️  Walking the waitlist flow on PyCon...')
    alice = engine.book_conference(user_id='alice', conference_name='PyCon')
    bob = engine.book_conference(user_id='bob', conference_name='PyCon')
    carol = engine.book_conference(user_id='carol', conference_name='PyCon')
    for user_id, booking_id in (('alice', alice), ('bob', bob), ('carol', carol)):
        print(f'   {user_id}: {engine.get_booking_status(booking_id=booking_id)}')

    engine.cancel_booking(booking_id=alice)
    view = engine.get_booking_status_view(booking_id=bob)
    print(f'   alice canceled; bob offered until {view.confirmation_deadline}')

    window = container.config_service().WAITLIST_CONFIRMATION_WINDOW_SECONDS
    clock.advance(seconds=window + 60)
    confirmed = engine.confirm_waitlisted_booking(booking_id=bob)
    print(f'   bob confirmed late -> {confirmed}, carol is now offered the slot')

    confirmed = engine.confirm_waitlisted_booking(booking_id=carol)
    print(f'   carol confirmed -> {confirmed}')

    availability = engine.get_conference_availability(conference_name='PyCon')
    print(
        f'   PyCon: {availability.available_slots}/{availability.total_slots} free, '
        f'{availability.waitlist_length} waiting'
    )


def main() -> None:
    print('🌱 Starting data seeding...')
    print('=' * 50)

    now = datetime.now(timezone.utc)
    clock = ManualClock(start=now)
    container.clock.override(providers.Object(clock))
    setup()
    engine = container.booking_engine()

    try:
        create_users(engine)
        print()
        create_conferences(engine, now=now)
        print()
        walkthrough(engine, clock)

        print()
        print('=' * 50)
        print('🌱 Data seeding completed!')

    except CustomBaseError as e:
        print(f'❌ Seeding failed: [{e.kind}] {e}')
        exit(1)

    finally:
        container.clock.reset_override()
        cleanup()


if __name__ == '__main__':
    main()
