from reddit.models.basic_model import BasicModel


class PrivateMessage(BasicModel):
    pass
