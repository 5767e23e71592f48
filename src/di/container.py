from dependency_injector import containers, providers
from clients.campus_data_client import CampusDataClient
from clients.geolocation_client import GeolocationClient
from config.config import SETTINGS
from ui.map_page import MapPage
from ui.navigator_page import NavigatorPage
from workflows.navigator_workflow import NavigatorWorkflow
from workflows.path_workflow import PathWorkflow


class Container(containers.DeclarativeContainer):
    # Clients
    campus_data_client = providers.Singleton(
        CampusDataClient, data_path=SETTINGS.campus_data_path
    )
    geolocation_client = providers.Singleton(GeolocationClient)

    # Workflows
    path_workflow = providers.Singleton(PathWorkflow, campus_data=campus_data_client)
    navigator_workflow = providers.Singleton(
        NavigatorWorkflow, campus_data=campus_data_client
    )

    # UI Pages
    navigator_page = providers.Singleton(
        NavigatorPage,
        navigator_workflow=navigator_workflow,
        geolocation_client=geolocation_client,
    )
    map_page = providers.Singleton(
        MapPage, campus_data=campus_data_client, path_workflow=path_workflow
    )
