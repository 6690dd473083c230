from sqlalchemy import Column, String, DateTime, Boolean, ForeignKey, SmallInteger, Integer
from sqlalchemy.orm import relationship
from .base import Model


class UserInfo(Model):
    __tablename__ = 'user_info'
    email = Column(String(30), nullable=True)
    nickname = Column(String(30), nullable=False, unique=True)
    avatar = Column(String(1024), nullable=False)
    intro = Column(String(255), nullable=True)
    website = Column(String(255), nullable=True)


class UserAuth(Model):
    __tablename__ = 'user_auth'
    username = Column(String(50), unique=True)
    # Hashed by the caller; never logged
    password = Column(String(100))
    login_type = Column(SmallInteger, nullable=False, default=0)
    ip_address = Column(String(20), nullable=True)
    ip_source = Column(String(50), nullable=True)
    last_login_time = Column(DateTime(timezone=True), nullable=True)
    is_disable = Column(Boolean, nullable=False, default=False)
    is_super = Column(Boolean, nullable=False, default=False)
    user_info_id = Column(Integer, ForeignKey('user_info.id'), nullable=False, index=True)

    user_info = relationship('UserInfo', lazy='select')
    # Written through UserAuthRole rows; the collection is read-only
    roles = relationship('Role', secondary='user_role', viewonly=True, order_by='Role.id')
