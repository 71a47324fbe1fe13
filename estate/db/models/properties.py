from sqlalchemy import Column, String, Text, Float, Integer, BigInteger, ForeignKey, Table, Index
from sqlalchemy.orm import relationship
from .base import Base, SoftDeleteMixin


prop_features = Table(
    'prop_features',
    Base.metadata,
    Column('property_id', Integer, ForeignKey('properties.id'), primary_key=True),
    Column('feature_id', Integer, ForeignKey('features.id'), primary_key=True),
)


class Property(SoftDeleteMixin, Base):
    __tablename__ = 'properties'
    postcode = Column(Integer, nullable=True)
    property_name = Column(String(25), nullable=False, unique=True)
    suburb = Column(String(25), nullable=True)
    city = Column(String(25), nullable=True)
    street_address_1 = Column(String(32), nullable=True)
    street_address_2 = Column(String(32), nullable=True)
    bedrooms = Column(Float, nullable=True)
    bathrooms = Column(Float, nullable=True)
    land_area = Column(Float, nullable=True)
    land_metric = Column(String(10), nullable=True)
    description = Column(Text, nullable=True)
    notes = Column(Text, nullable=True)

    features = relationship("Feature", secondary=prop_features, back_populates="properties")
    contacts = relationship("Contact", secondary="contact_properties", back_populates="properties")
    property_logs = relationship("PropertyLog", back_populates="property", order_by="PropertyLog.id")
    attachments = relationship("PropertyAttachment", back_populates="property")
    transactions = relationship("Transaction", back_populates="property")
    maintenance_requests = relationship("MaintenanceRequest", back_populates="property")


class Feature(SoftDeleteMixin, Base):
    __tablename__ = 'features'
    feature_name = Column(String(25), nullable=False, unique=True)

    properties = relationship("Property", secondary=prop_features, back_populates="features")


class PropertyLog(SoftDeleteMixin, Base):
    __tablename__ = 'property_logs'
    user_id = Column(Integer, ForeignKey('users.id'), nullable=True)
    property_id = Column(Integer, ForeignKey('properties.id'), nullable=False)
    log_message = Column(Text, nullable=False)
    # 'user' for hand-written entries, 'gen' for generated update summaries
    type = Column(String(10), nullable=False, default='user')

    user = relationship("User", back_populates="property_logs")
    property = relationship("Property", back_populates="property_logs")

    __table_args__ = (
        Index('idx_property_logs_property_id', 'property_id'),
    )


class PropertyAttachment(SoftDeleteMixin, Base):
    __tablename__ = 'property_attachments'
    label = Column(String(255), nullable=True)
    file_name = Column(String(255), nullable=False)
    file_size = Column(BigInteger, nullable=True)
    file_type = Column(String(32), nullable=True)
    etag = Column(String(255), nullable=True)
    object_key = Column(String(1024), nullable=False)
    property_id = Column(Integer, ForeignKey('properties.id'), nullable=False)

    property = relationship("Property", back_populates="attachments")

    __table_args__ = (
        Index('idx_property_attachments_property_id', 'property_id'),
    )
