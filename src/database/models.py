"""SQLAlchemy database models for StudyPilot"""

from datetime import datetime
from sqlalchemy import (
    Column, Integer, String, Float, Boolean, DateTime, ForeignKey, JSON, Date
)
from sqlalchemy.orm import declarative_base, relationship

Base = declarative_base()


class User(Base):
    """User profile and settings"""
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(100))
    email = Column(String(255), unique=True, index=True)
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)
    settings = Column(JSON, default=dict)  # target_gpa, total_credits_required

    # Relationships
    classes = relationship("SchoolClass", back_populates="user")


class SchoolClass(Base):
    """A class on the degree plan, enrolled or finished"""
    __tablename__ = "classes"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False)
    course_name = Column(String(255), nullable=False)
    code = Column(String(50))
    semester = Column(String(50))
    credits = Column(Integer, default=3)
    status = Column(String(20), default="in_progress")  # completed, in_progress, remaining
    passing_threshold = Column(String(1), default="C")  # A, B, C
    gpa = Column(Float, nullable=True)  # 0.0-4.0, None until completed
    critical_tracking = Column(Boolean, default=False)
    created_at = Column(DateTime, default=datetime.utcnow)

    # Relationships
    user = relationship("User", back_populates="classes")
    categories = relationship("GradingCategory", back_populates="school_class", cascade="all, delete-orphan")
    exams = relationship("Exam", back_populates="school_class", cascade="all, delete-orphan")


class GradingCategory(Base):
    """Weighted bucket of exams inside a class"""
    __tablename__ = "grading_categories"

    id = Column(Integer, primary_key=True, index=True)
    class_id = Column(Integer, ForeignKey("classes.id"), nullable=False)
    name = Column(String(100), nullable=False)
    weight = Column(Float, default=0.0)  # Percent of the class grade

    # Relationships
    school_class = relationship("SchoolClass", back_populates="categories")
    exams = relationship("Exam", back_populates="category")


class Exam(Base):
    """Exam or assignment with an optional score"""
    __tablename__ = "exams"

    id = Column(Integer, primary_key=True, index=True)
    class_id = Column(Integer, ForeignKey("classes.id"), nullable=False)
    category_id = Column(Integer, ForeignKey("grading_categories.id"), nullable=True)
    exam_name = Column(String(255), nullable=False)
    exam_date = Column(Date, nullable=True)
    weight = Column(Float, default=0.0)  # Percent of its category, or of the class
    grade_percent = Column(Float, nullable=True)  # None until graded
    created_at = Column(DateTime, default=datetime.utcnow)

    # Relationships
    school_class = relationship("SchoolClass", back_populates="exams")
    category = relationship("GradingCategory", back_populates="exams")
