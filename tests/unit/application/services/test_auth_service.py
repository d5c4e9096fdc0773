import pytest

import session_auth.application.services as svc
import session_auth.application.interfaces as iapp
import session_auth.application.exceptions as appexc


@pytest.mark.asyncio
async def test_auth_service_authenticate(mocker):
	mock_manager = mocker.AsyncMock()
	mock_manager.resolve_session.return_value = 'user-1'

	service = svc.AuthService(mock_manager)
	assert await service.authenticate('TOKEN') == 'user-1'
	mock_manager.resolve_session.assert_awaited_once_with('TOKEN')


@pytest.mark.asyncio
@pytest.mark.parametrize("resolved", [None, ""])
async def test_authenticate_unknown_token_is_invalid_session(mocker, resolved):
	mock_manager = mocker.AsyncMock()
	mock_manager.resolve_session.return_value = resolved
	service = svc.AuthService(mock_manager)
	with pytest.raises(appexc.InvalidSession):
		await service.authenticate('TOKEN')


@pytest.mark.asyncio
async def test_authenticate_internal_error_propagates(mocker):
	mock_manager = mocker.AsyncMock()
	mock_manager.resolve_session.side_effect = appexc.InternalError()
	service = svc.AuthService(mock_manager)
	with pytest.raises(appexc.InternalError):
		await service.authenticate('TOKEN')


@pytest.mark.asyncio
async def test_session_auth_service_login_refresh_logout(mocker):
	mock_manager = mocker.AsyncMock()
	mock_manager.create_session.return_value = 'T1'
	mock_manager.refresh_session.return_value = 'T2'
	mock_manager.delete_session.return_value = None

	service = svc.SessionAuthService(mock_manager)
	credentials = iapp.Credentials(email='a@x.com', password='p1')

	assert await service.login(credentials) == 'T1'
	mock_manager.create_session.assert_awaited_once_with(credentials)

	assert await service.refresh('user-1', 'T1') == 'T2'
	mock_manager.refresh_session.assert_awaited_once_with('user-1', 'T1')

	await service.logout('user-1', 'T2')
	mock_manager.delete_session.assert_awaited_once_with('user-1', 'T2')


@pytest.mark.asyncio
async def test_login_raises_propagates(mocker):
	mock_manager = mocker.AsyncMock()
	mock_manager.create_session.side_effect = appexc.BadCredentials()
	service = svc.SessionAuthService(mock_manager)
	with pytest.raises(appexc.BadCredentials):
		await service.login(iapp.Credentials(email='x@x.com', password='y'))
