import datetime

from sqlalchemy import String, Integer, Float, Boolean, Date, ForeignKey, true
from sqlalchemy.orm import Mapped, mapped_column, relationship
from .db import Base

# Employee model, soft-deleted through is_current_employee
class Employee(Base):
    __tablename__ = "Employee"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String, nullable=False)
    position: Mapped[str] = mapped_column(String, nullable=False)
    wage: Mapped[float] = mapped_column(Float, nullable=False)
    is_current_employee: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=True, server_default=true()
    )

    timesheets = relationship("Timesheet", back_populates="employee")

# Timesheet model
class Timesheet(Base):
    __tablename__ = "Timesheet"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    hours: Mapped[float] = mapped_column(Float, nullable=False)
    rate: Mapped[float] = mapped_column(Float, nullable=False)
    date: Mapped[datetime.date] = mapped_column(Date, nullable=False)
    employee_id: Mapped[int] = mapped_column(ForeignKey("Employee.id"), nullable=False)

    employee = relationship("Employee", back_populates="timesheets")

# Menu model
class Menu(Base):
    __tablename__ = "Menu"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column(String, nullable=False)

    menu_items = relationship("MenuItem", back_populates="menu")

# MenuItem model
class MenuItem(Base):
    __tablename__ = "MenuItem"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String, nullable=False)
    description: Mapped[str | None] = mapped_column(String, nullable=True)
    inventory: Mapped[int] = mapped_column(Integer, nullable=False)
    price: Mapped[float] = mapped_column(Float, nullable=False)
    menu_id: Mapped[int] = mapped_column(ForeignKey("Menu.id"), nullable=False)

    menu = relationship("Menu", back_populates="menu_items")

# Core tables, used by the storage accessor for plain parameterized statements
employee_table = Employee.__table__
timesheet_table = Timesheet.__table__
menu_table = Menu.__table__
menu_item_table = MenuItem.__table__
