from reddit.models.basic_model import BasicModel


class Submission(BasicModel):
    pass
