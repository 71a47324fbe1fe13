from sqlalchemy import Column, String
from sqlalchemy.orm import relationship
from .base import Base, SoftDeleteMixin


class User(SoftDeleteMixin, Base):
    __tablename__ = 'users'
    name = Column(String(80), nullable=True)
    username = Column(String(25), nullable=True)
    email = Column(String(255), nullable=False, unique=True, index=True)
    # Argon2 encoded hash, never the plaintext
    password = Column(String(255), nullable=False)
    role = Column(String(20), nullable=False, default='user')

    property_logs = relationship("PropertyLog", back_populates="user")
    task_logs = relationship("TaskLog", back_populates="user")
    tasks = relationship("Task", secondary="task_assignments", back_populates="assignment")
