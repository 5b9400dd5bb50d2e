from dataclasses import dataclass


@dataclass
class Student:
    id: str
    roll_no: str
    name: str

    @classmethod
    def from_dict(cls, data):
        return cls(
            id=str(data.get("id", "")),
            roll_no=str(data.get("rollNo", "")),
            name=str(data.get("name", "")),
        )

    def to_dict(self):
        return {"id": self.id, "rollNo": self.roll_no, "name": self.name}


@dataclass
class StudentStats:
    present: int = 0
    total: int = 0
    percentage: int = 0


@dataclass
class DayCounts:
    total_students: int
    present: int
    absent: int
    marked: int
    unmarked: int
    rate: int


@dataclass
class DaySummary:
    date: str
    present: int
    absent: int
    rate: int

    @property
    def marked(self):
        return self.present + self.absent
