"""Demos for the design pattern catalogue."""
from oodnotes.application.dto.demo import DemoContext, DemoResult
from oodnotes.domain.core.exceptions import CollaboratorNotAttachedError, NothingToUndoError
from oodnotes.domain.patterns.abstract_factory import DarkThemeFactory, Dialog, LightThemeFactory
from oodnotes.domain.patterns.adapter import MallardQuacker, TurkeyAdapter, WildTurkey, exercise_quacker
from oodnotes.domain.patterns.command import (
    GarageDoor,
    GarageDoorCloseCommand,
    GarageDoorOpenCommand,
    Light,
    LightOffCommand,
    LightOnCommand,
    MacroCommand,
    RemoteControl,
)
from oodnotes.domain.patterns.decorator import Espresso, Mocha, PlainBeverage, Surcharge, Whip
from oodnotes.domain.patterns.facade import (
    Amplifier,
    HomeTheaterFacade,
    Projector,
    StreamingPlayer,
    TheaterLights,
)
from oodnotes.domain.patterns.factory_method import ChicagoPizzaStore, NYPizzaStore
from oodnotes.domain.patterns.iterator import DinerMenu, PancakeHouseMenu, Waitress
from oodnotes.domain.patterns.memento import Editor, History, create_undo_policy
from oodnotes.domain.patterns.observer import (
    CurrentConditionsDisplay,
    ForecastDisplay,
    StatisticsDisplay,
    WeatherData,
)
from oodnotes.domain.patterns.singleton import OrderService, PaymentService
from oodnotes.domain.patterns.strategy import Duck, FlyRocketPowered, MallardDuck, ModelDuck, Squeak
from oodnotes.domain.patterns.template_method import BlackCoffee, Coffee, Tea
from oodnotes.infrastructure.registry.example_registry import ExampleCategory

CATEGORY = ExampleCategory.PATTERNS


def strategy_demo(context: DemoContext) -> DemoResult:
    """Behaviors are chosen by value and can be swapped at runtime."""
    mallard = MallardDuck()
    trace = [mallard.display(), mallard.perform_quack(), mallard.perform_fly()]

    model = ModelDuck()
    trace.append(model.perform_fly())
    model.set_fly_behavior(FlyRocketPowered())
    trace.append(model.perform_fly())
    model.set_quack_behavior(Squeak())
    trace.append(model.perform_quack())

    try:
        Duck().perform_quack()
    except CollaboratorNotAttachedError as e:
        trace.append(f"Unconfigured duck: {e}")
    return DemoResult(name="strategy", category=CATEGORY, trace=trace)


def observer_demo(context: DemoContext) -> DemoResult:
    """Displays are notified in registration order on every measurement."""
    weather = WeatherData()
    current = CurrentConditionsDisplay()
    statistics = StatisticsDisplay()
    forecast = ForecastDisplay()
    for display in (current, statistics, forecast):
        weather.register_observer(display)

    trace = []
    for reading in ((80, 65, 30.4), (82, 70, 29.2), (78, 90, 29.2)):
        weather.set_measurements(*reading)
        trace.extend([current.display(), statistics.display(), forecast.display()])

    weather.remove_observer(forecast)
    notified = weather.set_measurements(75, 60, 30.0)
    trace.append(f"Notified {notified} observers after removing the forecast display")
    return DemoResult(name="observer", category=CATEGORY, trace=trace)


def decorator_demo(context: DemoContext) -> DemoResult:
    """Condiments wrap a beverage and stack their costs."""
    stacked = Surcharge(Surcharge(PlainBeverage("Base", 100), "Extra shot", 20), "Oat milk", 40)
    espresso = Whip(Mocha(Mocha(Espresso())))
    trace = [
        f"{stacked.description()} = {stacked.cost()}",
        f"{espresso.description()} = {espresso.cost()}",
    ]
    return DemoResult(name="decorator", category=CATEGORY, trace=trace)


def factory_method_demo(context: DemoContext) -> DemoResult:
    """Each store decides which concrete pizza to create."""
    trace = []
    for store in (NYPizzaStore(), ChicagoPizzaStore()):
        pizza = store.order_pizza("cheese")
        trace.extend(pizza.steps)
        trace.append(f"{type(store).__name__} ordered a {pizza.name}")
    return DemoResult(name="factory-method", category=CATEGORY, trace=trace)


def abstract_factory_demo(context: DemoContext) -> DemoResult:
    """Swapping the factory swaps the whole widget family."""
    dialog = Dialog("Login", LightThemeFactory())
    trace = dialog.render()
    dialog.attach("widget_factory", DarkThemeFactory())
    trace.extend(dialog.render())
    return DemoResult(name="abstract-factory", category=CATEGORY, trace=trace)


def singleton_demo(context: DemoContext) -> DemoResult:
    """One audit log built by the composition root, passed to each service."""
    audit_log = context.audit_log
    orders = OrderService(audit_log)
    payments = PaymentService(audit_log)
    order_id = orders.place_order("book")
    payments.charge(order_id, 1999)
    trace = audit_log.entries[-2:]
    trace.append(f"Shared instance: {orders.audit_log is payments.audit_log}")
    return DemoResult(name="singleton", category=CATEGORY, trace=trace)


def command_demo(context: DemoContext) -> DemoResult:
    """Buttons hold command objects bundling a receiver and an action."""
    living_room = Light("Living Room")
    garage = GarageDoor()
    remote = RemoteControl(slot_count=4)
    remote.set_command(0, LightOnCommand(living_room))
    remote.set_command(1, LightOffCommand(living_room))
    remote.set_command(2, MacroCommand([GarageDoorOpenCommand(garage), LightOnCommand(living_room)]))

    trace = remote.describe()
    trace.extend(remote.press(slot) for slot in (0, 1, 2))
    try:
        remote.press(3)
    except CollaboratorNotAttachedError as e:
        trace.append(f"Empty button: {e}")
    remote.set_command(3, GarageDoorCloseCommand(garage))
    trace.append(remote.press(3))
    return DemoResult(name="command", category=CATEGORY, trace=trace)


def adapter_demo(context: DemoContext) -> DemoResult:
    """A turkey adapted to the Quacker interface used by duck clients."""
    trace = ["The duck says..."]
    trace.extend(exercise_quacker(MallardQuacker()))
    trace.append("The turkey adapter says...")
    trace.extend(exercise_quacker(TurkeyAdapter(WildTurkey())))
    return DemoResult(name="adapter", category=CATEGORY, trace=trace)


def facade_demo(context: DemoContext) -> DemoResult:
    """One call on the facade drives several subsystems in order."""
    theater = HomeTheaterFacade(Amplifier(), Projector(), StreamingPlayer(), TheaterLights())
    trace = theater.watch_movie("Raiders of the Lost Ark")
    trace.extend(theater.end_movie())
    return DemoResult(name="facade", category=CATEGORY, trace=trace)


def template_method_demo(context: DemoContext) -> DemoResult:
    """The recipe skeleton is fixed; subclasses fill in steps and the hook."""
    trace = []
    for recipe in (Tea(), Coffee(), BlackCoffee()):
        trace.append(f"Making {type(recipe).__name__}")
        trace.extend(recipe.prepare_recipe())
    return DemoResult(name="template-method", category=CATEGORY, trace=trace)


def iterator_demo(context: DemoContext) -> DemoResult:
    """The waitress iterates menus without knowing how they store items."""
    pancakes = PancakeHouseMenu()
    pancakes.add_item("K&B's Pancake Breakfast", "Pancakes with scrambled eggs and toast", True, 299)
    pancakes.add_item("Blueberry Pancakes", "Pancakes made with fresh blueberries", True, 349)
    diner = DinerMenu()
    diner.add_item("Vegetarian BLT", "Fakin' Bacon with lettuce and tomato", True, 299)
    diner.add_item("Hotdog", "A hot dog with relish and onions", False, 305)

    waitress = Waitress([pancakes, diner])
    trace = waitress.print_menu()
    trace.append("VEGETARIAN")
    trace.extend(waitress.print_vegetarian_menu())
    return DemoResult(name="iterator", category=CATEGORY, trace=trace)


def memento_demo(context: DemoContext) -> DemoResult:
    """Snapshots saved by a caretaker and restored on undo."""
    memento_config = context.config.memento
    editor = Editor()
    history = History(
        editor,
        undo_policy=create_undo_policy(memento_config.undo_policy.value),
        max_size=memento_config.max_history,
    )
    trace = [f"Undo policy: {memento_config.undo_policy.value}"]

    editor.type("Hello")
    history.backup()
    editor.type(", world")
    history.backup()
    editor.type("!!!")
    trace.append(f"Edited: {editor.content!r}")

    while True:
        try:
            history.undo()
        except NothingToUndoError as e:
            trace.append(f"Stop: {e}")
            break
        trace.append(f"Undo -> {editor.content!r}")
    return DemoResult(name="memento", category=CATEGORY, trace=trace)
