from sqlalchemy import Column, DateTime, Integer, String, Text

from .base import Base

TITLE_MAX_LENGTH = 50
# Signed 64-bit range of an INTEGER primary key.
POST_ID_MIN = -(2**63)
POST_ID_MAX = 2**63 - 1


class Post(Base):
    __tablename__ = "posts"

    # Ids are assigned by the caller.
    id = Column(Integer, primary_key=True, autoincrement=False)
    title = Column(String(TITLE_MAX_LENGTH), nullable=False)
    content = Column(Text, nullable=False)
    author = Column(String(255), nullable=True)
    published_date = Column(DateTime, nullable=True, index=True)

    def __repr__(self) -> str:
        return f"<Post id={self.id} title={self.title!r}>"
