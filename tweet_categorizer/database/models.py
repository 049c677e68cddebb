from sqlalchemy import Column, String, DateTime, Text
from sqlalchemy.orm import declarative_base
from sqlalchemy.sql import func

Base = declarative_base()


class ProcessedTweet(Base):
    """A tweet that has been seen and (optionally) categorized"""
    __tablename__ = 'processed_tweets'

    id = Column(String, primary_key=True)  # Tweet ID from Twitter
    processed_at = Column(DateTime, default=func.now())
    tweet_url = Column(Text)
    category = Column(String(64), index=True)
    tweet_text = Column(Text)

    def to_dict(self):
        return {
            'id': self.id,
            'processed_at': self.processed_at.isoformat() if self.processed_at else None,
            'tweet_url': self.tweet_url,
            'category': self.category,
            'tweet_text': self.tweet_text
        }

    def __repr__(self):
        return f"<ProcessedTweet(id={self.id}, category={self.category})>"
