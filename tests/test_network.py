import pytest
from uamsim.simulation.elements import Task, TaskType, Schedule
from uamsim.simulation.network import Link, Network, euclidean_distance, generate_station_grid, load_stations


def test_bounding_box(network):
    assert network.get_bounding_box() == (0., 0., 100., 100.)


def test_empty_network_has_no_bounding_box():
    with pytest.raises(ValueError):
        Network([]).get_bounding_box()


def test_euclidean_distance():
    assert euclidean_distance((0., 0.), (3., 4.)) == pytest.approx(5.)


def test_station_grid():
    network, stations = generate_station_grid(2, 3, 1000.)
    assert len(stations) == 6
    assert len(network) == 6
    assert network.get_bounding_box() == (0., 0., 2000., 1000.)
    assert all(station.link.link_id in network.links for station in stations.values())


def test_load_stations(tmp_path):
    path = tmp_path / 'stations.csv'
    path.write_text('station_id,name,x,y\n01,North,0,500\n02,South,250,0\n')

    network, stations = load_stations(str(path))

    assert set(stations) == {'01', '02'}
    assert stations['01'].coord == (0., 500.)
    assert network.get_bounding_box() == (0., 0., 250., 500.)


def test_links_compare_by_value():
    assert Link('l1', (1., 2.)) == Link('l1', (1., 2.))
    assert Link('l1', (1., 2.)) != Link('l2', (1., 2.))


def test_schedule_walks_tasks():
    link = Link('l', (0., 0.))
    schedule = Schedule(Task(TaskType.STAY, 0., float('inf'), link))
    assert schedule.task_at(1) is None
    with pytest.raises(RuntimeError):
        schedule.next_task(1.)

    schedule.add_task(Task(TaskType.FLY, 1., 2., link))
    fly = schedule.next_task(1.)

    assert fly.task_type is TaskType.FLY
    assert schedule.task_at(-1).end_time == 1.
    assert schedule.task_at(-2) is None


def test_only_pickup_and_dropoff_carry_requests():
    link = Link('l', (0., 0.))
    with pytest.raises(ValueError):
        Task(TaskType.FLY, 0., 1., link, requests=['r'])
