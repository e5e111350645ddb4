from sqlalchemy import Column, String, Integer, BigInteger, Date, CheckConstraint

from constants import UserLimits
from database import Base


class User(Base):
    """
    A persisted user.

    id is assigned by the store on insert and never reused (AUTOINCREMENT on
    SQLite, a sequence elsewhere). Age is not stored; it is derived from dob
    on read.
    """
    __tablename__ = 'users'

    # INTEGER on SQLite so the column aliases ROWID and AUTOINCREMENT applies
    id = Column(BigInteger().with_variant(Integer, "sqlite"), primary_key=True, autoincrement=True)
    name = Column(String(UserLimits.NAME_MAX_LENGTH), nullable=False)
    date_of_birth = Column('dob', Date, nullable=False)

    __table_args__ = (
        CheckConstraint("name != ''", name='ck_users_name_not_empty'),
        {'sqlite_autoincrement': True},
    )

    def __repr__(self) -> str:
        return f"<User id={self.id} name={self.name!r} dob={self.date_of_birth}>"
