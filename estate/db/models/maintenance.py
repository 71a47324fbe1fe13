from sqlalchemy import Column, String, Text, Integer, Float, ForeignKey
from sqlalchemy.orm import relationship
from .base import Base, SoftDeleteMixin


class MaintenanceRequest(SoftDeleteMixin, Base):
    __tablename__ = 'maintenance_requests'
    # Repair|Replacement|Project|Investigation|Pest Control|Other
    work_definition = Column(String(20), nullable=True)
    # Electrical|Plumbing|Painting|HVAC|Civil|Other
    type = Column(String(20), nullable=True)
    notes = Column(Text, nullable=True)
    # Urgent|High|Medium|Low
    scale = Column(String(10), nullable=True)
    total_cost = Column(Float, nullable=True)
    tax = Column(Float, nullable=True)
    property_id = Column(Integer, ForeignKey('properties.id'), nullable=True)
    task_id = Column(Integer, ForeignKey('tasks.id'), nullable=True)

    property = relationship("Property", back_populates="maintenance_requests")
    task = relationship("Task")
