"""git-standup: daily git activity digest across multiple repositories."""
