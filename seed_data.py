"""Seed script to populate the database with sample portfolio content."""

from portfolio import create_app
from portfolio.storage import get_storage


def seed_database():
    """Seed the database with sample data."""
    app = create_app()

    with app.app_context():
        if app.config['STORAGE_BACKEND'] != 'sql':
            print('STORAGE_BACKEND is not "sql"; set DATABASE_URL first.')
            return

        storage = get_storage()

        # Check if already seeded
        if storage.get_projects():
            print('Database already seeded!')
            return

        print('Seeding database...')

        admin = storage.upsert_user(app.config['ADMIN_USERNAME'], is_admin=True)

        storage.upsert_site_settings({
            'greeting_name': 'Alex',
            'hero_description': 'Designer and developer building calm, fast interfaces.',
            'works_subtitle': 'A few things I have made recently.',
        })

        storage.upsert_about_content({
            'title': 'About me',
            'subtitle': 'Product designer & front-end developer',
            'bio': 'I have spent the last eight years designing and shipping web products, '
                   'from early prototypes to design systems used by whole teams.',
            'skills': ['UI design', 'React', 'TypeScript', 'Python', 'Motion'],
            'social_links': {
                'github': 'https://github.com/example',
                'dribbble': 'https://dribbble.com/example',
            },
        })

        projects = [
            {
                'title': 'Weather Dashboard',
                'short_description': 'Forecasts at a glance with animated charts.',
                'description': 'A single-page dashboard pulling hourly forecasts, '
                               'with offline caching and keyboard navigation.',
                'category': 'Web',
                'tags': ['dashboard', 'data-viz'],
                'technologies': ['React', 'D3', 'Flask'],
                'role': 'Design & development',
                'year': 2024,
                'featured': True,
                'sort_order': 3,
                'images': [
                    {'image_url': '/public-objects/weather/overview.png', 'caption': 'Overview'},
                    {'image_url': '/public-objects/weather/detail.png', 'caption': 'Hourly detail', 'sort_order': 1},
                ],
            },
            {
                'title': 'Coffee Roaster Brand Identity',
                'short_description': 'Logo, packaging and a small online menu.',
                'category': 'Branding',
                'tags': ['branding', 'print'],
                'technologies': ['Figma', 'Illustrator'],
                'role': 'Designer',
                'year': 2023,
                'sort_order': 2,
            },
            {
                'title': 'Habit Tracker (draft)',
                'short_description': 'Mobile-first habit tracker, still in progress.',
                'category': 'Mobile',
                'technologies': ['React Native'],
                'year': 2025,
                'published': False,
                'sort_order': 1,
            },
        ]

        for project_data in projects:
            images = project_data.pop('images', [])
            project = storage.create_project(dict(project_data, user_id=admin.id))
            for image_data in images:
                storage.add_project_image(project.id, image_data)

        print('Database seeded successfully!')
        print(f'\nAdmin login: {app.config["ADMIN_USERNAME"]} / (ADMIN_PASSWORD from your environment)')


if __name__ == '__main__':
    seed_database()
