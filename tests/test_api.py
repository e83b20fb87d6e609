"""
HTTP tests for the REST endpoints.
"""
import uuid
from unittest import mock

import pytest
from django.urls import reverse


@pytest.mark.django_db
class TestUserEndpoints:

    def test_signup_login_profile(self, api_client):
        response = api_client.post('/api/v1/users/signup/', {
            'email': 'new@example.com',
            'password': 'secret123',
            'fullname': 'New User',
        }, format='json')
        assert response.status_code == 201
        assert response.data['data']['email'] == 'new@example.com'

        response = api_client.post('/api/v1/users/login/', {
            'email': 'new@example.com',
            'password': 'secret123',
        }, format='json')
        assert response.status_code == 200
        tokens = response.data['data']

        api_client.credentials(HTTP_AUTHORIZATION=f"Bearer {tokens['access_token']}")
        response = api_client.get('/api/v1/users/')
        assert response.status_code == 200
        assert response.data['data']['fullname'] == 'New User'

        response = api_client.post('/api/v1/users/token/refresh/', {
            'refresh': tokens['refresh_token'],
        }, format='json')
        assert response.status_code == 200
        assert 'access' in response.data

    def test_duplicate_signup_conflicts(self, api_client, create_user):
        create_user(email='taken@example.com')

        response = api_client.post('/api/v1/users/signup/', {
            'email': 'TAKEN@example.com',
            'password': 'secret123',
            'fullname': 'Someone',
        }, format='json')

        assert response.status_code == 409
        assert response.data['code'] == 'USER_ALREADY_EXISTS'

    def test_short_password_rejected(self, api_client):
        response = api_client.post('/api/v1/users/signup/', {
            'email': 'new@example.com',
            'password': '123',
            'fullname': 'New User',
        }, format='json')

        assert response.status_code == 400
        assert response.data['code'] == 'INVALID_INPUT'
        assert 'password' in response.data['errors']

    def test_bad_login(self, api_client, create_user):
        create_user(email='user@example.com', password='rightpass')

        response = api_client.post('/api/v1/users/login/', {
            'email': 'user@example.com',
            'password': 'wrongpass',
        }, format='json')

        assert response.status_code == 401
        assert response.data['code'] == 'INVALID_CREDENTIALS'

    def test_update_profile(self, authenticated_client, user):
        response = authenticated_client.put('/api/v1/users/', {
            'fullname': 'Renamed User',
            'avatar': 'https://cdn.example.com/avatar.png',
        }, format='json')

        assert response.status_code == 200
        assert response.data['data']['fullname'] == 'Renamed User'
        user.refresh_from_db()
        assert user.avatar == 'https://cdn.example.com/avatar.png'

    def test_blank_profile_fields_keep_values(self, authenticated_client, user):
        response = authenticated_client.put('/api/v1/users/', {
            'fullname': '',
            'avatar': 'https://cdn.example.com/new.png',
        }, format='json')

        assert response.status_code == 200
        user.refresh_from_db()
        assert user.fullname == 'Test User'
        assert user.avatar == 'https://cdn.example.com/new.png'

    def test_invalid_avatar_rejected(self, authenticated_client):
        response = authenticated_client.put(
            '/api/v1/users/', {'avatar': 'not a url'}, format='json'
        )

        assert response.status_code == 400
        assert 'avatar' in response.data['errors']

    def test_anonymous_profile_update_unauthorized(self, api_client):
        response = api_client.put('/api/v1/users/', {'fullname': 'Nobody'}, format='json')

        assert response.status_code == 401

    def test_anonymous_request_unauthorized(self, api_client):
        response = api_client.get('/api/v1/categories/tree/')

        assert response.status_code == 401
        assert response.data['status'] == 401


class TestCategoryEndpoints:

    def test_create_and_tree(self, authenticated_client, technology, laptops):
        response = authenticated_client.post(
            reverse('categories:category-create'),
            {'name': 'Gadgets', 'parent_id': str(technology.id)},
            format='json',
        )
        assert response.status_code == 201
        assert response.data['data']['full_path'] == 'Technology > Gadgets'
        assert response.data['data']['is_custom'] is True

        response = authenticated_client.get(reverse('categories:category-tree'))
        assert response.status_code == 200
        children = response.data['data'][0]['children']
        assert [child['name'] for child in children] == ['Laptops', 'Gadgets']

    def test_duplicate_conflict(self, authenticated_client):
        url = reverse('categories:category-create')
        authenticated_client.post(url, {'name': 'Camping'}, format='json')

        response = authenticated_client.post(url, {'name': 'camping'}, format='json')

        assert response.status_code == 409
        assert response.data['code'] == 'CATEGORY_ALREADY_EXISTS'

    def test_name_too_short(self, authenticated_client):
        response = authenticated_client.post(
            reverse('categories:category-create'), {'name': 'a'}, format='json'
        )

        assert response.status_code == 400
        assert response.data['code'] == 'INVALID_INPUT'

    def test_default_category_forbidden(self, authenticated_client, technology):
        url = reverse('categories:category-detail', args=[technology.id])

        assert authenticated_client.put(url, {'name': 'Tech'}, format='json').status_code == 403
        response = authenticated_client.delete(url)
        assert response.status_code == 403
        assert response.data['code'] == 'DEFAULT_CATEGORY'

    @pytest.mark.parametrize('category_id', ['not-a-uuid', uuid.uuid4()])
    def test_unknown_category_not_found(self, authenticated_client, category_id):
        response = authenticated_client.get(
            reverse('categories:category-detail', args=[category_id])
        )

        assert response.status_code == 404
        assert response.data['code'] == 'CATEGORY_NOT_FOUND'

    def test_flat_parents_children(self, authenticated_client, technology, laptops):
        flat = authenticated_client.get(reverse('categories:category-flat')).data['data']
        assert [row['full_path'] for row in flat] == ['Technology > Laptops', 'Technology']

        parents = authenticated_client.get(reverse('categories:category-parents')).data['data']
        assert [row['name'] for row in parents] == ['Technology']

        children = authenticated_client.get(
            reverse('categories:category-children', args=[technology.id])
        ).data['data']
        assert [row['name'] for row in children] == ['Laptops']

    def test_category_assets(self, authenticated_client, user, other_user, technology, garage, create_asset):
        create_asset(user, technology, garage, name='Mine')
        create_asset(other_user, technology, garage, name='Theirs')

        response = authenticated_client.get(
            reverse('categories:category-assets', args=[technology.id])
        )

        assert response.status_code == 200
        assert [asset['name'] for asset in response.data['data']['assets']] == ['Mine']


class TestLocationEndpoints:

    def test_crud(self, authenticated_client, garage):
        list_url = reverse('locations:location-list-create')

        response = authenticated_client.post(list_url, {'name': 'Shed'}, format='json')
        assert response.status_code == 201
        location_id = response.data['data']['id']

        names = [row['name'] for row in authenticated_client.get(list_url).data['data']]
        assert names == ['Garage', 'Shed']

        detail_url = reverse('locations:location-detail', args=[location_id])
        response = authenticated_client.put(detail_url, {'name': 'Workshop'}, format='json')
        assert response.status_code == 200
        assert response.data['data']['name'] == 'Workshop'

        assert authenticated_client.delete(detail_url).status_code == 200
        assert authenticated_client.get(detail_url).status_code == 404

    def test_in_use_conflict(self, authenticated_client, user, technology, location_service, create_asset):
        shed = location_service.create_location(user.id, 'Shed')
        create_asset(user, technology, shed)

        response = authenticated_client.delete(
            reverse('locations:location-detail', args=[shed.id])
        )

        assert response.status_code == 409
        assert response.data['code'] == 'LOCATION_IN_USE'


class TestAssetEndpoints:

    def _payload(self, category, location, **overrides):
        payload = {
            'name': 'Laptop',
            'price': '1299.99',
            'condition': 'good',
            'category_id': str(category.id),
            'location_id': str(location.id),
        }
        payload.update(overrides)
        return payload

    def test_create_list_update_delete(self, authenticated_client, technology, garage):
        list_url = reverse('assets:asset-list-create')

        response = authenticated_client.post(list_url, self._payload(technology, garage), format='json')
        assert response.status_code == 201
        asset = response.data['data']
        assert asset['category']['name'] == 'Technology'
        assert asset['location']['name'] == 'Garage'

        response = authenticated_client.get(list_url, {'limit': 5})
        assert response.status_code == 200
        assert [row['id'] for row in response.data['data']['assets']] == [asset['id']]
        assert response.data['data']['pagination'] == {
            'current_page': 1,
            'total_items': 1,
            'total_pages': 1,
            'limit': 5,
        }

        detail_url = reverse('assets:asset-detail', args=[asset['id']])
        response = authenticated_client.patch(detail_url, {'condition': 'fair'}, format='json')
        assert response.status_code == 200
        assert response.data['data']['condition'] == 'fair'

        assert authenticated_client.delete(detail_url).status_code == 200
        assert authenticated_client.get(detail_url).status_code == 404

    def test_limit_is_capped(self, authenticated_client):
        response = authenticated_client.get(reverse('assets:asset-list-create'), {'limit': 500})

        assert response.data['data']['pagination']['limit'] == 100

    def test_page_past_the_end_is_empty(self, authenticated_client, user, technology, garage, create_asset):
        create_asset(user, technology, garage)

        response = authenticated_client.get(reverse('assets:asset-list-create'), {'page': 3})

        assert response.status_code == 200
        assert response.data['data']['assets'] == []
        assert response.data['data']['pagination'] == {
            'current_page': 3,
            'total_items': 1,
            'total_pages': 1,
            'limit': 10,
        }

    @pytest.mark.parametrize('page', ['abc', '0', '-2'])
    def test_malformed_page_means_first_page(self, authenticated_client, user, technology, garage, create_asset, page):
        create_asset(user, technology, garage)

        response = authenticated_client.get(reverse('assets:asset-list-create'), {'page': page})

        assert response.status_code == 200
        assert response.data['data']['pagination']['current_page'] == 1
        assert len(response.data['data']['assets']) == 1

    def test_negative_price_rejected(self, authenticated_client, technology, garage):
        response = authenticated_client.post(
            reverse('assets:asset-list-create'),
            self._payload(technology, garage, price='-5'),
            format='json',
        )

        assert response.status_code == 400
        assert 'price' in response.data['errors']

    def test_foreign_location_not_found(
        self, authenticated_client, other_user, technology, location_service
    ):
        theirs = location_service.create_location(other_user.id, 'Boathouse')

        response = authenticated_client.post(
            reverse('assets:asset-list-create'),
            self._payload(technology, theirs),
            format='json',
        )

        assert response.status_code == 404
        assert response.data['code'] == 'LOCATION_NOT_FOUND'

    def test_price_inversion_rejected(self, authenticated_client):
        response = authenticated_client.get(
            reverse('assets:asset-list-create'), {'min_price': 10, 'max_price': 1}
        )

        assert response.status_code == 400
        assert response.data['code'] == 'INVALID_PRICE_RANGE'

    def test_multipart_image_upload(self, authenticated_client, technology, garage):
        from io import BytesIO

        from django.core.files.uploadedfile import SimpleUploadedFile
        from PIL import Image

        buffer = BytesIO()
        Image.new('RGB', (2, 2)).save(buffer, format='PNG')
        upload = SimpleUploadedFile('photo.png', buffer.getvalue(), content_type='image/png')

        with mock.patch(
            'modules.assets.services.default_storage.upload_image',
            return_value='http://storage.test/test-bucket/assets/photo.png',
        ):
            response = authenticated_client.post(
                reverse('assets:asset-list-create'),
                self._payload(technology, garage, image=upload),
                format='multipart',
            )

        assert response.status_code == 201
        assert response.data['data']['image'] == 'http://storage.test/test-bucket/assets/photo.png'


@pytest.mark.django_db
class TestHealth:

    def test_health_endpoints(self, api_client):
        assert api_client.get('/api/v1/health/').status_code == 200
        assert api_client.get('/api/v1/health/live/').status_code == 200

        response = api_client.get('/api/v1/health/ready/')
        assert response.status_code == 200
        assert response.data['checks']['database']['healthy'] is True
