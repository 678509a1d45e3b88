from reddit.models.basic_model import BasicModel


class Comment(BasicModel):
    pass
