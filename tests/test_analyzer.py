from typing import Annotated

import pytest

from graphbind import (
    AutoFactoryComponentModel,
    CircularDependencyError,
    DependencyGraphAnalyzer,
    InstanceComponentModel,
    Registry,
    TypeComponentModel,
    UnresolvedDependencyError,
    inject,
    named,
)


class LCDScreen: ...


@inject
class Monitor:
    def __init__(self, screen: LCDScreen):
        self.screen = screen


@inject
class Computer:
    def __init__(self, monitor: Monitor):
        self.monitor = monitor


@inject
class CyclicScreen:
    def __init__(self, computer: Annotated[object, named("Computer")]):
        self.computer = computer


def cyclic_models():
    return [
        TypeComponentModel.of(CyclicScreen, "LCDScreen"),
        TypeComponentModel.of(Monitor, dependencies=["LCDScreen"]),
        TypeComponentModel.of(Computer, "Computer"),
    ]


def test_analyze_accepts_fully_registered_graph_with_shared_dependencies():
    class Keyboard: ...

    class Mouse: ...

    @inject
    class Workstation:
        def __init__(self, monitor: Monitor, extension_monitor: Monitor, keyboard: Keyboard, mouse: Mouse):
            pass

    analyzer = DependencyGraphAnalyzer(
        [
            TypeComponentModel.of(Keyboard),
            TypeComponentModel.of(Mouse),
            TypeComponentModel.of(LCDScreen),
            TypeComponentModel.of(Monitor),
            TypeComponentModel.of(Workstation),
        ]
    )
    assert analyzer.analyze(Workstation) is None


def test_analyze_treats_other_kinds_as_leaves():
    @inject
    class NamedMonitor:
        def __init__(self, screen: Annotated[object, named("LCD")]):
            pass

    @inject
    class NamedComputer:
        def __init__(self, monitor: Annotated[object, named("MonitorFactory")]):
            pass

    analyzer = DependencyGraphAnalyzer(
        [
            InstanceComponentModel("LCD", value=LCDScreen()),
            AutoFactoryComponentModel("MonitorFactory", component=NamedMonitor),
            TypeComponentModel.of(NamedComputer, "Computer"),
        ]
    )
    assert analyzer.analyze(NamedComputer) is None


def test_analyze_does_not_follow_auto_factory_target():
    analyzer = DependencyGraphAnalyzer([AutoFactoryComponentModel("MonitorFactory", component="Missing")])
    analyzer.analyze("MonitorFactory")


def test_analyze_reports_unregistered_root():
    analyzer = DependencyGraphAnalyzer([])
    with pytest.raises(UnresolvedDependencyError) as ctx:
        analyzer.analyze("MyComponent")
    assert str(ctx.value) == "Trying to resolve MyComponent but MyComponent is not registered in container"
    assert ctx.value.path == ["MyComponent"]


def test_analyze_reports_path_to_unregistered_dependency():
    analyzer = DependencyGraphAnalyzer(
        [
            # LCDScreen not registered
            TypeComponentModel.of(Monitor),
            TypeComponentModel.of(Computer),
        ]
    )
    with pytest.raises(UnresolvedDependencyError) as ctx:
        analyzer.analyze(Computer)
    assert str(ctx.value) == (
        "Trying to resolve Computer -> Monitor -> LCDScreen but LCDScreen is not registered in container"
    )
    assert ctx.value.path == ["Computer", "Monitor", "LCDScreen"]


def test_analyze_reports_circular_dependency():
    analyzer = DependencyGraphAnalyzer(cyclic_models())
    with pytest.raises(CircularDependencyError) as ctx:
        analyzer.analyze("Computer")
    assert str(ctx.value) == "Circular dependency detected on: Computer -> Monitor -> LCDScreen -> Computer"
    assert ctx.value.path == ["Computer", "Monitor", "LCDScreen", "Computer"]


def test_analyze_reports_self_dependency():
    class Node:
        def __init__(self, parent):
            self.parent = parent

    analyzer = DependencyGraphAnalyzer([TypeComponentModel.of(Node, dependencies=["Node"])])
    with pytest.raises(CircularDependencyError) as ctx:
        analyzer.analyze(Node)
    assert str(ctx.value) == "Circular dependency detected on: Node -> Node"


def test_analyze_skips_already_analyzed_component():
    models = cyclic_models()
    models[0].analyzed = True
    analyzer = DependencyGraphAnalyzer(models)
    assert analyzer.analyze("Computer") is None


def test_analyze_marks_validated_models():
    models = [TypeComponentModel.of(LCDScreen), TypeComponentModel.of(Monitor), TypeComponentModel.of(Computer)]
    DependencyGraphAnalyzer(models).analyze(Computer)
    assert all(m.analyzed for m in models)


def test_analyze_does_not_mark_models_on_failure():
    models = [TypeComponentModel.of(Monitor), TypeComponentModel.of(Computer)]
    with pytest.raises(UnresolvedDependencyError):
        DependencyGraphAnalyzer(models).analyze(Computer)
    assert not any(m.analyzed for m in models)


def test_analyze_sibling_paths_do_not_leak():
    class Left:
        def __init__(self, screen):
            pass

    class Right:
        def __init__(self, missing):
            pass

    class Root:
        def __init__(self, left, right):
            pass

    analyzer = DependencyGraphAnalyzer(
        [
            TypeComponentModel.of(LCDScreen),
            TypeComponentModel.of(Left, dependencies=[LCDScreen]),
            TypeComponentModel.of(Right, dependencies=["Missing"]),
            TypeComponentModel.of(Root, dependencies=[Left, Right]),
        ]
    )
    with pytest.raises(UnresolvedDependencyError) as ctx:
        analyzer.analyze(Root)
    assert ctx.value.path == ["Root", "Right", "Missing"]


def test_analyze_accepts_registry():
    registry = Registry([TypeComponentModel.of(LCDScreen)])
    DependencyGraphAnalyzer(registry).analyze(LCDScreen)
    assert next(iter(registry)).analyzed
