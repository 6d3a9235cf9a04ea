import pytest
from uamsim.simulation.appender import SingleRideAppender
from uamsim.simulation.elements import TaskType, Vehicle


def test_update_commits_queued_ride(stations, single_seat, make_request):
    vehicle = Vehicle('V', single_seat, stations['A'])
    request = make_request('C', 'D')
    woken = []
    appender = SingleRideAppender(cruise_speed=1., boarding_time=2., deboarding_time=3., listener=woken.append)

    appender.schedule(request, vehicle, 10.)
    assert len(vehicle.schedule.tasks) == 1

    appender.update()

    types = [task.task_type for task in vehicle.schedule.tasks]
    assert types == [TaskType.STAY, TaskType.FLY, TaskType.PICKUP, TaskType.FLY, TaskType.DROPOFF, TaskType.STAY]
    assert woken == [vehicle]
    assert appender.assignments == []


def test_ride_timing_and_links(stations, single_seat, make_request):
    vehicle = Vehicle('V', single_seat, stations['A'])
    request = make_request('C', 'D')
    appender = SingleRideAppender(cruise_speed=1., boarding_time=2., deboarding_time=3.)

    appender.append_ride(request, vehicle, 10.)

    stay, access, pickup, flight, dropoff, final = vehicle.schedule.tasks
    assert stay.end_time == 10.
    assert access.link == stations['A'].link
    assert access.to_link == request.from_link
    assert access.end_time == pytest.approx(10. + 2 ** 0.5)
    assert pickup.duration == pytest.approx(2.)
    assert flight.to_link == request.to_link
    assert flight.duration == pytest.approx(49 * 2 ** 0.5)
    assert dropoff.duration == pytest.approx(3.)
    assert final.link == request.to_link
    assert final.end_time == float('inf')


def test_pickup_and_dropoff_keep_separate_request_lists(stations, single_seat, make_request):
    vehicle = Vehicle('V', single_seat, stations['A'])
    appender = SingleRideAppender()
    appender.append_ride(make_request('C', 'D'), vehicle, 0.)

    pickup = vehicle.schedule.tasks[2]
    dropoff = vehicle.schedule.tasks[4]
    assert pickup.requests is not dropoff.requests
    assert vehicle.schedule.task_at(1) is vehicle.schedule.tasks[1]


def test_busy_vehicle_cannot_take_a_second_ride(stations, single_seat, make_request):
    vehicle = Vehicle('V', single_seat, stations['A'])
    appender = SingleRideAppender()
    appender.append_ride(make_request('C', 'D'), vehicle, 0.)

    with pytest.raises(RuntimeError):
        appender.append_ride(make_request('C', 'D'), vehicle, 0.)


def test_update_starts_rides_at_commit_time(stations, single_seat, make_request):
    vehicle = Vehicle('V', single_seat, stations['A'])
    appender = SingleRideAppender(cruise_speed=10.)
    appender.schedule(make_request('C', 'D'), vehicle, 0.)

    appender.update(5.)

    stay, access = vehicle.schedule.tasks[:2]
    assert stay.end_time == 5.
    assert access.begin_time == 5.
    assert access.end_time == pytest.approx(5. + 2 ** 0.5 / 10.)
