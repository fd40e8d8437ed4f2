"""Demos for the SOLID principles."""
from oodnotes.application.dto.demo import DemoContext, DemoResult
from oodnotes.domain.core.exceptions import UnsupportedOperationError, ValidationError
from oodnotes.domain.solid.dip import EmailSender, HardwiredNotifier, Notifier, SmsSender
from oodnotes.domain.solid.isp import Human, HumanWorker, Robot, RobotWorker
from oodnotes.domain.solid.lsp import (
    Bird,
    GoodPenguin,
    Penguin,
    Sparrow,
    make_birds_fly,
    make_flying_birds_fly,
)
from oodnotes.domain.solid.ocp import Circle, Rectangle, ShapeAreaCalculator, Triangle, total_area
from oodnotes.domain.solid.srp import (
    BloatedInvoice,
    InMemoryInvoiceRepository,
    Invoice,
    InvoicePrinter,
    LineItem,
)
from oodnotes.infrastructure.registry.example_registry import ExampleCategory

CATEGORY = ExampleCategory.SOLID


def srp_demo(context: DemoContext) -> DemoResult:
    """One class per reason to change: totals, rendering and storage."""
    bloated = BloatedInvoice("INV-0", [("Widget", 250, 2)], tax_rate=0.1)
    trace = [f"Violating: {type(bloated).__name__} owns total, render and save"]

    invoice = Invoice(
        "INV-1",
        [LineItem(description="Widget", unit_price=250, quantity=2),
         LineItem(description="Gadget", unit_price=1000)],
        tax_rate=0.1,
    )
    repository = InMemoryInvoiceRepository()
    repository.save(invoice)
    trace.extend(InvoicePrinter().render(invoice).splitlines())
    trace.append(f"Stored: {repository.find('INV-1') is invoice}")
    return DemoResult(name="srp", category=CATEGORY, trace=trace)


def ocp_demo(context: DemoContext) -> DemoResult:
    """New shapes extend the system without editing the area calculation."""
    calculator = ShapeAreaCalculator()
    rectangle = {"kind": "rectangle", "width": 2, "height": 3}
    trace = [f"Violating total: {calculator.total_area([rectangle]):.2f}"]
    try:
        calculator.area({"kind": "triangle", "base": 4, "height": 3})
    except ValidationError as e:
        trace.append(f"Violating calculator needs editing: {e}")
    shapes = [Rectangle(2, 3), Circle(1), Triangle(4, 3)]
    trace.append(f"Compliant total: {total_area(shapes):.2f}")
    return DemoResult(name="ocp", category=CATEGORY, trace=trace)


def lsp_demo(context: DemoContext) -> DemoResult:
    """A Penguin that cannot fly breaks code written against Bird."""
    trace = []
    try:
        trace.extend(make_birds_fly([Bird("Robin"), Penguin("Pingu")]))
    except UnsupportedOperationError as e:
        trace.append(f"Violating hierarchy fails: {e}")
    trace.extend(make_flying_birds_fly([Sparrow("Jack")]))
    penguin = GoodPenguin("Pingu")
    trace.append(penguin.eat())
    trace.append(penguin.swim())
    return DemoResult(name="lsp", category=CATEGORY, trace=trace)


def isp_demo(context: DemoContext) -> DemoResult:
    """Small contracts spare a robot from pretending to eat."""
    trace = [HumanWorker().work(), HumanWorker().eat(), RobotWorker().work()]
    try:
        RobotWorker().eat()
    except UnsupportedOperationError as e:
        trace.append(f"Violating contract forces: {e}")
    human, robot = Human(), Robot()
    trace.extend([human.work(), human.eat(), robot.work()])
    return DemoResult(name="isp", category=CATEGORY, trace=trace)


def dip_demo(context: DemoContext) -> DemoResult:
    """The notifier depends on MessageSender, not on a concrete sender."""
    trace = [HardwiredNotifier().notify("ops@example.com", "disk full")]
    notifier = Notifier(EmailSender())
    trace.append(notifier.notify("ops@example.com", "disk full"))
    notifier.attach("sender", SmsSender())
    trace.append(notifier.notify("+15550100", "disk full"))
    return DemoResult(name="dip", category=CATEGORY, trace=trace)
