"""Demos for class relationships."""
from oodnotes.application.dto.demo import DemoContext, DemoResult
from oodnotes.domain.relationships import (
    Cat,
    Department,
    Dog,
    House,
    Professor,
    Student,
    Teacher,
)
from oodnotes.infrastructure.registry.example_registry import ExampleCategory

CATEGORY = ExampleCategory.RELATIONSHIPS


def association_demo(context: DemoContext) -> DemoResult:
    """A teacher knows its students; both live independently."""
    alice, bob = Student("Alice"), Student("Bob")
    teacher = Teacher("Ms. Smith")
    teacher.add_student(alice)
    teacher.add_student(bob)
    trace = teacher.teach()
    teacher.remove_student(bob)
    trace.append(f"{bob.name} still exists after leaving the class")
    trace.extend(teacher.teach())
    return DemoResult(name="association", category=CATEGORY, trace=trace)


def aggregation_demo(context: DemoContext) -> DemoResult:
    """A department groups professors it did not create; they outlive it."""
    turing = Professor("Prof. Turing", "computability")
    hopper = Professor("Prof. Hopper", "compilers")
    department = Department("Computer Science", [turing, hopper])
    trace = department.lectures()
    department.remove_professor(hopper)
    trace.append(f"Removed {hopper.name}; {len(department.professors)} professor(s) remain")
    del department
    trace.append(hopper.lecture())
    trace.append(turing.lecture())
    return DemoResult(name="aggregation", category=CATEGORY, trace=trace)


def composition_demo(context: DemoContext) -> DemoResult:
    """A house builds and owns its rooms; demolishing it destroys them."""
    house = House("1 Elm Street", ["Kitchen", "Bedroom"])
    house.add_room("Study")
    trace = [room.describe() for room in house.rooms]
    destroyed = house.demolish()
    trace.append(f"Demolished house and {destroyed} rooms; {len(house.rooms)} rooms left")
    return DemoResult(name="composition", category=CATEGORY, trace=trace)


def inheritance_demo(context: DemoContext) -> DemoResult:
    """Dog and Cat reuse Animal.describe and override speak."""
    trace = []
    for animal in (Dog("Rex"), Cat("Tom")):
        trace.append(animal.describe())
        trace.append(animal.speak())
    return DemoResult(name="inheritance", category=CATEGORY, trace=trace)
