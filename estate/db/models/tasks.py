from sqlalchemy import Column, String, Text, Integer, Boolean, DateTime, ForeignKey, Table, Index
from sqlalchemy.orm import relationship
from .base import Base, SoftDeleteMixin


task_assignments = Table(
    'task_assignments',
    Base.metadata,
    Column('task_id', Integer, ForeignKey('tasks.id'), primary_key=True),
    Column('user_id', Integer, ForeignKey('users.id'), primary_key=True),
)


class Task(SoftDeleteMixin, Base):
    __tablename__ = 'tasks'
    task_name = Column(String(36), nullable=True)
    # maintenance|inspection|transaction|other
    type = Column(String(20), nullable=True)
    status = Column(String(20), nullable=True)
    notes = Column(Text, nullable=True)
    snoozed = Column(Boolean, nullable=False, default=False)
    snoozed_till = Column(DateTime(timezone=True), nullable=True)
    completed = Column(Boolean, nullable=False, default=False)

    assignment = relationship("User", secondary=task_assignments, back_populates="tasks")
    log = relationship("TaskLog", back_populates="task", order_by="TaskLog.id")


class TaskLog(SoftDeleteMixin, Base):
    __tablename__ = 'task_logs'
    user_id = Column(Integer, ForeignKey('users.id'), nullable=True)
    task_id = Column(Integer, ForeignKey('tasks.id'), nullable=False)
    log_message = Column(Text, nullable=False)
    type = Column(String(10), nullable=True, default='user')

    user = relationship("User", back_populates="task_logs")
    task = relationship("Task", back_populates="log")

    __table_args__ = (
        Index('idx_task_logs_task_id', 'task_id'),
    )
