class Messageable:
    """Mixin for models that can be sent a private message."""

    def send_message(self, to: str, subject: str, text: str, from_=None):
        """
        Compose a message to a user or a subreddit's moderators.

        `from_` is an optional Subreddit to send the message on behalf of.
        """
        form = {'to': to, 'subject': subject, 'text': text}
        if from_ is not None:
            form['from_sr'] = from_.get_attribute('display_name')
        return self.client.post('/api/compose', **form)
