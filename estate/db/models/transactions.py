from sqlalchemy import Column, String, Text, Integer, Float, Boolean, DateTime, ForeignKey, Table
from sqlalchemy.orm import relationship
from .base import Base, SoftDeleteMixin


transaction_contacts = Table(
    'transaction_contacts',
    Base.metadata,
    Column('transaction_id', Integer, ForeignKey('transactions.id'), primary_key=True),
    Column('contact_id', Integer, ForeignKey('contacts.id'), primary_key=True),
)


class Transaction(SoftDeleteMixin, Base):
    __tablename__ = 'transactions'
    # buy|sell|rent|lease
    type = Column(String(10), nullable=True)
    # own|other
    agency = Column(String(10), nullable=True)
    agency_name = Column(String(80), nullable=True)
    status = Column(String(20), nullable=True)
    is_lease = Column(Boolean, nullable=False, default=False)
    tenancy_type = Column(String(36), nullable=True)
    transaction_notes = Column(Text, nullable=True)
    transaction_value = Column(Float, nullable=True)
    fee = Column(Float, nullable=True)
    transaction_completion = Column(DateTime(timezone=True), nullable=True)
    snoozed = Column(Boolean, nullable=False, default=False)
    snoozed_till = Column(DateTime(timezone=True), nullable=True)
    property_id = Column(Integer, ForeignKey('properties.id'), nullable=True)
    task_id = Column(Integer, ForeignKey('tasks.id'), nullable=True)

    property = relationship("Property", back_populates="transactions")
    task = relationship("Task")
    contacts = relationship("Contact", secondary=transaction_contacts, back_populates="transactions")
