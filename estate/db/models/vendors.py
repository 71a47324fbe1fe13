from sqlalchemy import Column, String, Integer, ForeignKey, Table
from sqlalchemy.orm import relationship
from .base import Base, SoftDeleteMixin


vendor_work_types = Table(
    'vendor_work_types',
    Base.metadata,
    Column('vendor_id', Integer, ForeignKey('vendors.id'), primary_key=True),
    Column('work_type_id', Integer, ForeignKey('work_types.id'), primary_key=True),
)


class Vendor(SoftDeleteMixin, Base):
    __tablename__ = 'vendors'
    company_name = Column(String(255), nullable=False)
    # Indonesian tax number and business registration number
    npwp = Column(String(20), nullable=False)
    nib = Column(String(20), nullable=True)
    email = Column(String(255), nullable=True)
    phone = Column(String(20), nullable=True)
    street_address_1 = Column(String(255), nullable=True)
    street_address_2 = Column(String(255), nullable=True)
    city = Column(String(100), nullable=True)
    postal_code = Column(String(10), nullable=True)
    suburb = Column(String(100), nullable=True)
    province = Column(String(100), nullable=True)

    work_types = relationship("WorkType", secondary=vendor_work_types, back_populates="vendors")


class WorkType(SoftDeleteMixin, Base):
    __tablename__ = 'work_types'
    name = Column(String(255), nullable=False, unique=True)

    vendors = relationship("Vendor", secondary=vendor_work_types, back_populates="work_types")
