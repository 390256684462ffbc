"""SQLAlchemy models for signquote database."""

from datetime import datetime, date, UTC
from sqlalchemy import (
    Column,
    Integer,
    String,
    ForeignKey,
    DateTime,
    Date,
    Numeric,
    create_engine,
)
from sqlalchemy.orm import declarative_base, relationship, sessionmaker, Session

Base = declarative_base()


class Project(Base):
    """Project model."""

    __tablename__ = "projects"

    id = Column(Integer, primary_key=True)
    name = Column(String, unique=True, nullable=False)
    client = Column(String, nullable=True)
    description = Column(String, nullable=True)
    status = Column(String, default="draft", nullable=False)
    start_date = Column(Date, nullable=True)
    end_date = Column(Date, nullable=True)
    created_at = Column(DateTime, default=lambda: datetime.now(UTC), nullable=False)

    # Relationships
    budgets = relationship("BudgetDoc", back_populates="project")


class BudgetDoc(Base):
    """Budget document (quote) model."""

    __tablename__ = "budget_docs"

    id = Column(Integer, primary_key=True)
    project_id = Column(Integer, ForeignKey("projects.id"), nullable=False)
    name = Column(String, nullable=False)
    client = Column(String, nullable=False)
    version = Column(Integer, default=1, nullable=False)
    issue_date = Column(Date, default=date.today, nullable=False)
    discount_doc = Column(Numeric(18, 2), default=0, nullable=False)
    iva_pct = Column(Numeric(6, 4), default=0.10, nullable=False)
    status = Column(String, default="draft", nullable=False)
    description = Column(String, nullable=True)
    created_at = Column(DateTime, default=lambda: datetime.now(UTC), nullable=False)

    # Relationships
    project = relationship("Project", back_populates="budgets")
    items = relationship(
        "BudgetItem",
        back_populates="document",
        cascade="all, delete-orphan",
    )


class BudgetItem(Base):
    """Budget line model.

    Derived columns (area_m2, area_m2_ceil, total_gs) are written from the
    pricing calculator's output on every insert and update.
    """

    __tablename__ = "budget_items"

    id = Column(Integer, primary_key=True)
    doc_id = Column(Integer, ForeignKey("budget_docs.id"), nullable=False)
    item_no = Column(Integer, nullable=False)
    description = Column(String, default="", nullable=False)
    category = Column(String, default="otros", nullable=False)
    color = Column(String, default="", nullable=False)
    faces = Column(Integer, default=1, nullable=False)
    height_cm = Column(Numeric(14, 4), default=0, nullable=False)
    width_cm = Column(Numeric(14, 4), default=0, nullable=False)
    area_m2 = Column(Numeric(18, 8), default=0, nullable=False)
    area_m2_ceil = Column(Numeric(14, 2), default=0, nullable=False)
    qty = Column(Numeric(14, 4), default=1, nullable=False)
    unit_price = Column(Numeric(18, 2), default=0, nullable=False)
    discount_pct = Column(Numeric(6, 4), default=0, nullable=False)
    total_gs = Column(Numeric(18, 2), default=0, nullable=False)

    # Relationships
    document = relationship("BudgetDoc", back_populates="items")


def create_session_factory(database_url: str) -> sessionmaker[Session]:
    """Create a SQLAlchemy session factory."""
    engine = create_engine(database_url, echo=False)
    Base.metadata.create_all(engine)
    return sessionmaker(bind=engine)
