from sqlalchemy import Column, String, Text, Integer, ForeignKey, Table
from sqlalchemy.orm import relationship
from .base import Base, SoftDeleteMixin


contact_properties = Table(
    'contact_properties',
    Base.metadata,
    Column('contact_id', Integer, ForeignKey('contacts.id'), primary_key=True),
    Column('property_id', Integer, ForeignKey('properties.id'), primary_key=True),
)


class Contact(SoftDeleteMixin, Base):
    __tablename__ = 'contacts'
    first_name = Column(String(36), nullable=False)
    last_name = Column(String(36), nullable=True)
    contact_type = Column(String(36), nullable=False)
    email = Column(String(255), nullable=True)
    phone = Column(String(16), nullable=True)
    mobile = Column(String(16), nullable=True)
    contact_notes = Column(Text, nullable=True)

    properties = relationship("Property", secondary=contact_properties, back_populates="contacts")
    transactions = relationship("Transaction", secondary="transaction_contacts", back_populates="contacts")
