from sqlalchemy import Column, Integer, String, DateTime
from sqlalchemy.orm import declarative_base

Base = declarative_base()

class ScoreRecord(Base):
    """One completed game's result. Rows are append-only."""
    __tablename__ = 'leaderboard'
    
    id = Column(Integer, primary_key=True, autoincrement=True)
    player_name = Column('playerName', String(100), nullable=False)
    score = Column(Integer, nullable=False)
    date = Column(DateTime, nullable=False)  # Naive UTC
    
    def __repr__(self):
        return f"<ScoreRecord(id={self.id}, player='{self.player_name}', score={self.score})>"
