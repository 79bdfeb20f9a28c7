from roi_simulator.schemas.common import ORMModel


class ReportRead(ORMModel):
    filename: str
    content: str
