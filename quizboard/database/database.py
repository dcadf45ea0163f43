from typing import Optional

from sqlalchemy.ext.asyncio import create_async_engine, async_sessionmaker, AsyncEngine, AsyncSession

from quizboard.config import Config
from quizboard.database.models import Base
from quizboard.utils.logger import setup_logger

class Database:
    def __init__(self, database_url: Optional[str] = None, **engine_kwargs):
        self.logger = setup_logger(__name__)
        self.database_url = database_url or Config.get_async_database_url()
        self.engine_kwargs = engine_kwargs
        self.engine: Optional[AsyncEngine] = None
        self.async_session: Optional[async_sessionmaker] = None
        
    async def initialize(self):
        """Initialize the database connection and create tables"""
        if self.engine is not None:
            return
        
        self.logger.info("Initializing database...")
        
        self.engine = create_async_engine(
            self.database_url,
            echo=Config.DEBUG,
            **self.engine_kwargs
        )
        
        self.async_session = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False
        )
        
        # Create the leaderboard table if it does not exist yet
        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
            
        self.logger.info("Database initialized successfully")
    
    @property
    def session_factory(self) -> async_sessionmaker:
        """Session factory handed to services"""
        if self.async_session is None:
            raise RuntimeError("Database.initialize() must be awaited before use")
        return self.async_session
    
    async def close(self):
        """Close the database connection"""
        if self.engine:
            await self.engine.dispose()
            self.engine = None
            self.async_session = None
            self.logger.info("Database connection closed")
