from band_achievements.controller import NO_DATA_MESSAGE, AchievementsController, LoadStatus
from band_achievements.io import SheetFetchError
from band_achievements.overlay import BackgroundActivated, ImageActivated, OutsideActivated


def _failing_fetch():
    raise SheetFetchError("Could not fetch sheet CSV: 404 Not Found")


def test_display_is_empty_before_any_load():
    controller = AchievementsController()
    controller.set_search("al")
    controller.set_sort("cards")
    assert controller.display_list() == []
    assert controller.state.status is LoadStatus.IDLE


def test_load_then_filter(scenario_csv):
    controller = AchievementsController()
    assert controller.load(lambda: scenario_csv) is LoadStatus.READY
    assert [s.name for s in controller.display_list()] == ["Alice", "Bob"]
    controller.set_search("BO")
    assert [s.name for s in controller.display_list()] == ["Bob"]


def test_header_only_sheet_is_no_data():
    controller = AchievementsController()
    assert controller.load(lambda: "Student,Card,Points\n") is LoadStatus.NO_DATA
    assert controller.state.message == NO_DATA_MESSAGE
    assert controller.display_list() == []


def test_failed_load_keeps_previous_students(scenario_csv):
    controller = AchievementsController()
    controller.load(lambda: scenario_csv)
    before = controller.state.students

    assert controller.load(_failing_fetch) is LoadStatus.ERROR
    assert controller.state.students is before
    assert "404" in controller.state.message
    assert [s.name for s in controller.display_list()] == ["Alice", "Bob"]


def test_failed_first_load_leaves_empty_state():
    controller = AchievementsController()
    controller.load(_failing_fetch)
    assert controller.state.students == []
    assert controller.display_list() == []


def test_successful_load_replaces_set(scenario_csv):
    controller = AchievementsController()
    controller.load(lambda: scenario_csv)
    controller.load(lambda: "Student,Card,Points\nCy,Solo,3\n")
    assert [s.name for s in controller.state.students] == ["Cy"]


def test_unknown_sort_is_stored_as_points():
    controller = AchievementsController()
    controller.set_sort("bogus")
    assert controller.state.sort == "points"


def test_dispatch_opens_and_closes_overlay():
    controller = AchievementsController()
    generation = controller.next_generation()
    controller.dispatch(ImageActivated(src="a.png", alt="A", generation=generation))
    assert controller.state.overlay.src == "a.png"
    controller.dispatch(BackgroundActivated())
    assert not controller.state.overlay.is_open


def test_stale_image_activation_is_dropped():
    controller = AchievementsController()
    old = controller.next_generation()
    controller.next_generation()
    state = controller.dispatch(ImageActivated(src="gone.png", alt="", generation=old))
    assert not state.is_open


def test_outside_activation_closes_after_rerender():
    controller = AchievementsController()
    generation = controller.next_generation()
    controller.dispatch(ImageActivated(src="a.png", alt="A", generation=generation))
    controller.next_generation()
    controller.dispatch(OutsideActivated())
    assert not controller.state.overlay.is_open
