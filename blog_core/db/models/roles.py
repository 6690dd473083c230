from sqlalchemy import Column, String, Boolean, ForeignKey, Integer
from .base import Base, Model


class Role(Model):
    __tablename__ = 'role'
    name = Column(String(20), unique=True)
    label = Column(String(50), unique=True)
    is_disable = Column(Boolean, nullable=False, default=False)


class UserAuthRole(Base):
    __tablename__ = 'user_role'
    user_auth_id = Column(Integer, ForeignKey('user_auth.id'), primary_key=True)
    role_id = Column(Integer, ForeignKey('role.id'), primary_key=True)
