import pytest

from wren.core.scheduler import Scheduler, Stage


def recorder(log, name):
    def system(world):
        log.append(name)

    system.__name__ = name
    return system


def test_after_and_before_constraints(world):
    log = []
    scheduler = Scheduler()
    scheduler.add_system(Stage.UPDATE, recorder(log, "c"), after="b")
    scheduler.add_system(Stage.UPDATE, recorder(log, "a"), before=["b"])
    scheduler.add_system(Stage.UPDATE, recorder(log, "b"))

    scheduler.run_stage(Stage.UPDATE, world)

    assert log == ["a", "b", "c"]


def test_stages_are_isolated(world):
    log = []
    scheduler = Scheduler()
    scheduler.add_system(Stage.LAST, recorder(log, "last"))
    scheduler.add_system(Stage.ASSETS, recorder(log, "assets"))

    scheduler.run_stage(Stage.ASSETS, world)
    assert log == ["assets"]

    scheduler.run_stage(Stage.LAST, world)
    assert log == ["assets", "last"]


def test_cross_stage_dependency_ignored(world):
    log = []
    scheduler = Scheduler()
    scheduler.add_system(Stage.LAST, recorder(log, "late"), after="elsewhere")

    scheduler.run_stage(Stage.LAST, world)

    assert log == ["late"]


def test_cycle_detected():
    scheduler = Scheduler()
    scheduler.add_system(Stage.UPDATE, recorder([], "a"), after="b")
    scheduler.add_system(Stage.UPDATE, recorder([], "b"), after="a")

    with pytest.raises(RuntimeError, match="Cycle detected in stage UPDATE"):
        scheduler.compile()


def test_cannot_add_after_compile():
    scheduler = Scheduler()
    scheduler.compile()

    with pytest.raises(RuntimeError, match="after scheduler is compiled"):
        scheduler.add_system(Stage.UPDATE, recorder([], "x"))


def test_duplicate_names_rejected():
    scheduler = Scheduler()
    scheduler.add_system(Stage.UPDATE, recorder([], "x"))

    with pytest.raises(ValueError, match="already registered"):
        scheduler.add_system(Stage.ASSETS, recorder([], "y"), name="x")


def test_explicit_name_and_listing():
    scheduler = Scheduler()
    name = scheduler.add_system(Stage.LAST, recorder([], "x"), name="custom")

    assert name == "custom"
    assert scheduler.system_names(Stage.LAST) == ["custom"]
    assert scheduler.system_names(Stage.UPDATE) == []


def test_clear_allows_new_registration(world):
    log = []
    scheduler = Scheduler()
    scheduler.add_system(Stage.UPDATE, recorder(log, "old"))
    scheduler.compile()

    scheduler.clear()
    scheduler.add_system(Stage.UPDATE, recorder(log, "new"))
    scheduler.run_stage(Stage.UPDATE, world)

    assert log == ["new"]


def test_after_all_runs_last_in_its_stage(world):
    log = []
    scheduler = Scheduler()
    scheduler.add_system(Stage.LAST, recorder(log, "early"))
    scheduler.add_system(Stage.LAST, recorder(log, "final"), after_all=True)
    # Registered later, with no constraints of its own
    scheduler.add_system(Stage.LAST, recorder(log, "late"))
    scheduler.add_system(Stage.LAST, recorder(log, "later"), after="late")

    scheduler.run_stage(Stage.LAST, world)

    assert log[-1] == "final"
    assert sorted(log) == ["early", "final", "late", "later"]


def test_after_all_only_once_per_stage():
    scheduler = Scheduler()
    scheduler.add_system(Stage.LAST, recorder([], "a"), after_all=True)
    scheduler.add_system(Stage.UPDATE, recorder([], "b"), after_all=True)

    with pytest.raises(ValueError, match="already has a system ordered after all"):
        scheduler.add_system(Stage.LAST, recorder([], "c"), after_all=True)


def test_after_all_with_explicit_successor_is_a_cycle():
    scheduler = Scheduler()
    scheduler.add_system(Stage.LAST, recorder([], "final"), after_all=True)
    scheduler.add_system(Stage.LAST, recorder([], "x"), after="final")

    with pytest.raises(RuntimeError, match="Cycle detected in stage LAST"):
        scheduler.compile()
