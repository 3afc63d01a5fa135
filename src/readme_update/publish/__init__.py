from readme_update.publish.git import GitPublisher, PublishResult, publish_readme

__all__ = ["GitPublisher", "PublishResult", "publish_readme"]
