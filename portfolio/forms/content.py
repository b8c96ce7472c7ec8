"""Forms for portfolio content managed from the admin panel."""

from wtforms import StringField, TextAreaField, IntegerField, BooleanField
from wtforms.validators import DataRequired, InputRequired, Length, NumberRange, Optional
from .base import JsonForm, StringListField, JsonObjectField, _none_to_zero, _strip


class ProjectForm(JsonForm):
    """Portfolio project."""
    title = StringField('Title', filters=[_strip], validators=[
        DataRequired(message='Title is required'),
        Length(max=255)
    ])
    description = TextAreaField('Description', validators=[Optional()])
    short_description = StringField('Short Description', filters=[_strip], validators=[
        Optional(),
        Length(max=500)
    ])
    image_url = StringField('Image URL', filters=[_strip], validators=[Optional(), Length(max=500)])
    tags = StringListField('Tags')
    category = StringField('Category', filters=[_strip], validators=[Optional(), Length(max=100)])
    external_url = StringField('External URL', filters=[_strip], validators=[Optional(), Length(max=500)])
    github_url = StringField('GitHub URL', filters=[_strip], validators=[Optional(), Length(max=500)])
    technologies = StringListField('Technologies')
    role = StringField('Role', filters=[_strip], validators=[Optional(), Length(max=255)])
    year = IntegerField('Year', validators=[Optional(), NumberRange(min=1900, max=2100)])
    featured = BooleanField('Featured')
    published = BooleanField('Published')
    sort_order = IntegerField('Sort Order', filters=[_none_to_zero], validators=[Optional()])


class ProjectUpdateForm(ProjectForm):
    """Partial project update; fields absent from the body are not validated."""

    def validate(self, extra_validators=None):
        for name, field in self._fields.items():
            if name not in self.payload:
                field.validators = [Optional()]
        return super().validate(extra_validators)


class ProjectImageForm(JsonForm):
    """Extra image attached to a project."""
    image_url = StringField('Image URL', filters=[_strip], validators=[
        DataRequired(message='image_url is required'),
        Length(max=500)
    ])
    caption = StringField('Caption', filters=[_strip], validators=[Optional(), Length(max=500)])
    sort_order = IntegerField('Sort Order', filters=[_none_to_zero], validators=[Optional()])


class ImageOrderForm(JsonForm):
    sort_order = IntegerField('Sort Order', validators=[
        InputRequired(message='sort_order is required')
    ])


class AboutForm(JsonForm):
    """About page content."""
    title = StringField('Title', filters=[_strip], validators=[Optional(), Length(max=255)])
    subtitle = StringField('Subtitle', filters=[_strip], validators=[Optional(), Length(max=500)])
    bio = TextAreaField('Bio', validators=[Optional()])
    photo_url = StringField('Photo URL', filters=[_strip], validators=[Optional(), Length(max=500)])
    resume_url = StringField('Resume URL', filters=[_strip], validators=[Optional(), Length(max=500)])
    skills = StringListField('Skills', max_items=100)
    social_links = JsonObjectField('Social Links')


class SiteSettingsForm(JsonForm):
    """Hero section and branding texts."""
    greeting_name = StringField('Greeting Name', filters=[_strip], validators=[Optional(), Length(max=100)])
    greeting_prefix = StringField('Greeting Prefix', filters=[_strip], validators=[Optional(), Length(max=100)])
    hero_title = StringField('Hero Title', filters=[_strip], validators=[Optional(), Length(max=255)])
    hero_highlight = StringField('Hero Highlight', filters=[_strip], validators=[Optional(), Length(max=255)])
    hero_description = TextAreaField('Hero Description', validators=[Optional()])
    works_title = StringField('Works Title', filters=[_strip], validators=[Optional(), Length(max=255)])
    works_subtitle = TextAreaField('Works Subtitle', validators=[Optional()])
