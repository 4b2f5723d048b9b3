"""Visitor, real world: salary reports over a company structure.

`Company`, `Department` and `Employee` only know how to `accept` a visitor.
`SalaryReport` walks the tree and formats costs.
"""

from __future__ import annotations

from abc import ABC, abstractmethod


def format_total(amount: int) -> str:
    return f"USD {amount:,.2f}"


def format_salary(amount: int) -> str:
    return f"${amount:,.2f}"


class Entity(ABC):
    @abstractmethod
    def accept(self, visitor: "Visitor") -> str:
        ...


class Employee(Entity):
    def __init__(self, name: str, position: str, salary: int) -> None:
        self.name = name
        self.position = position
        self.salary = salary

    def accept(self, visitor: "Visitor") -> str:
        return visitor.visit_employee(self)


class Department(Entity):
    def __init__(self, name: str, employees: list[Employee]) -> None:
        self.name = name
        self.employees = employees

    def get_cost(self) -> int:
        return sum(employee.salary for employee in self.employees)

    def accept(self, visitor: "Visitor") -> str:
        return visitor.visit_department(self)


class Company(Entity):
    def __init__(self, name: str, departments: list[Department]) -> None:
        self.name = name
        self.departments = departments

    def get_cost(self) -> int:
        return sum(department.get_cost() for department in self.departments)

    def accept(self, visitor: "Visitor") -> str:
        return visitor.visit_company(self)


class Visitor(ABC):
    @abstractmethod
    def visit_company(self, company: Company) -> str:
        ...

    @abstractmethod
    def visit_department(self, department: Department) -> str:
        ...

    @abstractmethod
    def visit_employee(self, employee: Employee) -> str:
        ...


class SalaryReport(Visitor):
    def visit_company(self, company: Company) -> str:
        body = "".join(f"\n--{self.visit_department(department)}" for department in company.departments)
        return f"{company.name} ({format_total(company.get_cost())})\n{body}"

    def visit_department(self, department: Department) -> str:
        body = "".join(f"   {self.visit_employee(employee)}" for employee in department.employees)
        return f"{department.name} ({format_total(department.get_cost())})\n\n{body}"

    def visit_employee(self, employee: Employee) -> str:
        return f"{format_salary(employee.salary):>12} {employee.name} ({employee.position})\n"


def build_company() -> Company:
    mobile_dev = Department(
        "Mobile Development",
        [
            Employee("Albert Falmore", "designer", 100000),
            Employee("Ali Halabay", "programmer", 100000),
            Employee("Sarah Konor", "programmer", 90000),
            Employee("Monica Ronaldino", "QA engineer", 31000),
            Employee("James Smith", "QA engineer", 30000),
        ],
    )
    tech_support = Department(
        "Tech Support",
        [
            Employee("Larry Ulbrecht", "supervisor", 70000),
            Employee("Elton Pale", "operator", 30000),
            Employee("Rajeet Kumar", "operator", 30000),
            Employee("John Burnovsky", "operator", 34000),
            Employee("Sergey Korolev", "operator", 35000),
        ],
    )
    return Company("SuperStarDevelopment", [mobile_dev, tech_support])


def main() -> None:
    company = build_company()
    report = SalaryReport()

    print("Client: I can print a report for a whole company:\n")
    print(company.accept(report))

    print("Client: ...or for different entities such as an employee, a department, or the whole company:\n")
    some_employee = Employee("Some employee", "operator", 35000)
    for entity in (some_employee, company.departments[1], company):
        print(entity.accept(report))


if __name__ == "__main__":
    main()
