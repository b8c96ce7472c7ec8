"""Authentication forms."""

from wtforms import StringField, PasswordField
from wtforms.validators import DataRequired, Length
from .base import JsonForm


class LoginForm(JsonForm):
    """Admin login form."""
    username = StringField('Username', validators=[
        DataRequired(message='Username is required'),
        Length(max=100)
    ])
    password = PasswordField('Password', validators=[
        DataRequired(message='Password is required'),
        Length(max=200)
    ])
